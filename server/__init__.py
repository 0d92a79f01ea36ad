"""Flask service exposing the pathing queries over HTTP."""
