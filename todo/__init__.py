"""todo - a single-user task list persisted in a JSON file."""

__version__ = "0.1.0"
