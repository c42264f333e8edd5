import importlib

# Imported on demand so registration runs after logging is configured
BUILTIN_STEP_MODULES = ["inquire", "mentor_issue", "geocode", "calendar", "website"]


def load_builtin_steps():
    """Import the built-in step modules so their decorators register them."""
    for module in BUILTIN_STEP_MODULES:
        importlib.import_module(f"{__name__}.{module}")
