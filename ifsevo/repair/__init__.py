"""Repair module for ifsevo."""

from .repair import clamp_transform_count, enforce_transforms_contractivity, pad_transforms  # re-export

__all__ = [
    'pad_transforms',
    'clamp_transform_count',
    'enforce_transforms_contractivity',
]
