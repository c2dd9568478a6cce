"""Member directory adapters for deciding who may borrow."""
