"""Rotating morning slides for a Vestaboard split-flap display."""
