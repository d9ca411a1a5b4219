"""
project: Quinti-Maze
module: __init__.py
License: MIT

Logic core of a 5x5x5 maze exploration game plus its host drivers.

Subpackages:
    quintimaze.maze  grid, seeded generator and exit solver
    quintimaze.game  phase machine, commands, platform capability, renderer protocol
    quintimaze.web   Flask / Flask-SocketIO host (imports Flask; not needed by the core)
"""

__version__ = "0.4.0"
