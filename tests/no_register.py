"""Suite module that forgot to define register(mt)."""

SUITES = ["Messaging"]
