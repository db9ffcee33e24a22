"""
Core conversion engine: digit tables, validation, normalization,
64-bit accumulation and the pairwise radix conversions.

Модуль не зависит от I/O и внешних систем.
"""
