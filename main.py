from snake_game.utils import main

if __name__ == "__main__":
    main()
