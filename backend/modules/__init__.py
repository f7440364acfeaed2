"""
Feature modules of the Postline backend.

auth, posts, images and notifications each keep their own models,
exceptions and routes; cross-module calls go through the interfaces.py
protocols rather than concrete services.
"""
