"""Todo API: a single-resource to-do list service and its client view."""
