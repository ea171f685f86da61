import logging

from config import Config
from controller import ReservationController
from database import Database
from gui import ReservationApp

if __name__ == "__main__":
    """
    Main entry point for the application.
    Sets up logging and the database, then starts the Tkinter main loop.
    """
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(asctime)s %(levelname)s: %(message)s")
    db_instance = Database(Config.DB_NAME)
    app = ReservationApp(ReservationController(db_instance))
    app.mainloop()
