"""Feature packages for rpaths."""
