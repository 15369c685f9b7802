"""
Testing Module for Snake Arcade

pytest suites for the chain, grid, engine, session, loop, starfield and rendering.
"""
