# modules/__init__.py
# -*- coding: utf-8 -*-
