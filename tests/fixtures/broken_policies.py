"""A policy module that fails while importing."""

raise RuntimeError("broken policy module")
