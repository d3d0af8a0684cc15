# Services/__init__.py
