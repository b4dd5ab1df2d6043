"""User interfaces for rpaths."""
