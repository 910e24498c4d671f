"""Terminal user interface: navigation, views and the event loop."""
