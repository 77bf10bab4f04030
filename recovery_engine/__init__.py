"""Recovery analytics engine — fatigue, condition and workout recommendation."""
