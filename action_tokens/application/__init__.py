"""Application layer.

Orchestrates the token lifecycle over domain ports. Depends on domain and
core only; infrastructure adapters are wired in by the container.
"""
