# -*- coding: utf-8 -*-
from .rules_v4 import VERSION
from .splitter import segment, segment_joined

__all__ = ["VERSION", "segment", "segment_joined"]
