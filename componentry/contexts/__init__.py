"""Bounded contexts of componentry: templating and rendering."""
