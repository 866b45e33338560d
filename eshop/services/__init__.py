"""Business operations over the credential store and resource tables."""
