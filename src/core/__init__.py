"""
Core domain models, mathematical primitives, and invariants.

Кодирование цены из ограниченного диапазона в компактный fixed-point int
и битовая интроспекция IEEE 754 float для верификации.
"""
