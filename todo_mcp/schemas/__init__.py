"""Input schemas validated before any store method is called."""
