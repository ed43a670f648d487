#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Install the rubik_astar solver modules and the rubik-solve command
python -m pip install -e .[test]
"""

from setuptools import setup

setup(
        name="rubik_astar",
        version="0.1.0",
        description="3x3 cube solver: depth 4 pattern database with a best first search",
        python_requires=">=3.8",
        py_modules=[
                "cube_net",
                "face_rotation",
                "rubiks_cube",
                "pattern_db",
                "heuristic_estimate",
                "astar_solve",
                "rubik_solve",
        ],
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},
        entry_points={
                "console_scripts": ["rubik-solve = rubik_solve:main"],
        },
)
