"""
Duel Pong: a two-player Pong game built on mini-arcade-core.
"""
