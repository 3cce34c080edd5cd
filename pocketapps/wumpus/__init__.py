"""Hunt the Wumpus: cave rooms, events, player, game rules and the command-line entry point."""