"""
Core package для vecrect.

Содержит скалярную математику, доменные типы (векторы, прямоугольники),
контракты сериализации и адаптеры совместимости.
"""
