import dotenv

dotenv.load_dotenv()

from shiny import App  # noqa: E402

from liftmax.server import server  # noqa: E402
from liftmax.ui import app_ui  # noqa: E402

app = App(app_ui, server)
