"""Administrative read API over legislative system notifications."""
