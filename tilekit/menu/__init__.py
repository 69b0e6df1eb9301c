"""Menu item matching and the editing and navigation state of a menu."""