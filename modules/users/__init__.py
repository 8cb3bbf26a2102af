# modules/users/__init__.py
# -*- coding: utf-8 -*-

from .users_controller import UsersController, UserService, filter_records, validate_record_form
from .users_view import create_users_view

__all__ = ["UsersController", "UserService", "filter_records", "validate_record_form", "create_users_view"]
