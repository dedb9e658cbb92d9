"""
Scenes package for Duel Pong. Scenes register themselves on import.
"""
