# dayplanner/__init__.py
