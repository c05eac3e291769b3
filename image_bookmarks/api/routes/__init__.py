"""Route modules."""

# Methods for routes that answer regardless of method
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
