"""A terminal snake game: wall, food, snake body and game loop."""