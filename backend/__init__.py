"""Investment projection calculator: core, console and web shells."""
