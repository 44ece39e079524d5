"""Page objects and the interaction layer they are built on."""
