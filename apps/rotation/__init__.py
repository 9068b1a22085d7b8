"""
Rotation App - Whose Turn Is It

Derives the next coffee buyer from the roster order and the newest
participant purchase, and reconciles the rotation when someone buys out
of turn.
"""
