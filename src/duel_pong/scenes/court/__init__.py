"""
Court scene package: world model, systems and the scene itself.
"""
