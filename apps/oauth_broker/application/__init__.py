"""Application Layer."""
