"""Encoders and decoders that convert `Money` to and from external representations."""
