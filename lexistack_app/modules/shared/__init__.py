# File: lexistack_app/modules/shared/__init__.py
# Purpose: Shared helpers used by several feature modules. No routes live here.
