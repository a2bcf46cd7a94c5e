"""Domain services — derived views and helpers used by the routers."""
