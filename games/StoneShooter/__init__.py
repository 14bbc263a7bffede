"""StoneShooter - tilt-steered shoot-'em-up."""
