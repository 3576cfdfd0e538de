# -*- coding: utf-8 -*-

from .cli import main

main(prog_name="py-sdl")
