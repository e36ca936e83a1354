"""famcal - family calendar views."""
