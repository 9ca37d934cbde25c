"""Kernel – error hierarchy shared by every mp_features package."""
