# simulations/__init__.py
"""
Monte Carlo runs of the dance marathon jukebox.

Run a marathon via:
    python -m simulations.marathon songs.txt --trials ... --seed ...
"""
