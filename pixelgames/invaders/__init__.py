"""A small Space Invaders clone that draws into an RGBA frame buffer."""