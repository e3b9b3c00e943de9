"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

from daily_wordle import create_app
from daily_wordle.config import Config
from daily_wordle.services.word_source import initialize_word_source
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Initialize word source (validates the bundled word lists)
        word_source = initialize_word_source(Config.WORD_EPOCH)
        print(f"✓ Word source loaded: {len(word_source.answers)} answers, "
              f"{len(word_source.valid_guesses)} valid guesses")

        # Initialize game service
        game_service = initialize_game_service(
            word_source,
            message_timeout_ms=Config.MESSAGE_TIMEOUT_MS,
            shake_timeout_ms=Config.SHAKE_TIMEOUT_MS
        )
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Daily Wordle Server Starting")

        print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Word epoch: {Config.WORD_EPOCH}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
