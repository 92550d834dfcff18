"""
Main entrypoint for the Campground Manager web application.

Usage:
    The server can be run directly (`python main.py`); it listens on HOST:PORT
    (default 0.0.0.0:3000) and stores campgrounds in the database at DB_URL.
"""
import uvicorn

from src import config


def main():
    """
    Main function to run the web server.
    """
    try:
        print(f"Starting Campground Manager at port {config.PORT}")
        uvicorn.run("src.api.app:app", host=config.HOST, port=config.PORT)
        return 0
    except Exception as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
