"""Game mechanics: session reducer, initiative, naming, HP and library helpers."""
