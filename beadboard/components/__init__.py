"""
Components package.

Leaf building blocks (filesystem, subprocess, parsing). Components never
import services or interfaces.
"""
