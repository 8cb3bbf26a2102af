# config/__init__.py
# -*- coding: utf-8 -*-
