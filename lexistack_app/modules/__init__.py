"""Feature modules registered through :mod:`lexistack_app.core.module_registry`."""
