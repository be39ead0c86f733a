"""
Dance marathon: a birthday-paradox style jukebox simulation.

Songs are drawn uniformly at random from a catalog until one repeats; play
counts accumulate across many independent trials.
"""
