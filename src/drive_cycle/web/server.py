"""
Web server - aiohttp application for the debug interface.
"""

import logging
from pathlib import Path
from typing import Optional

from aiohttp import web

from ..config import WEB_HOST, WEB_PORT
from ..control import SimulationDriver, SimulationResult
from ..exceptions import InvalidInputError
from ..params import Parameters
from ..perception import NavigationState
from ..perception.visualizer import RouteVisualizer

logger = logging.getLogger(__name__)

# Path to templates
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


class WebServer:
    """
    Debug web interface server.

    Provides:
    - Dashboard page
    - Simulation runs over REST
    - Runtime parameter tuning
    - Route image of the last run
    """

    def __init__(self, params: Optional[Parameters] = None):
        """
        Args:
            params: Shared Parameters instance (defaults if None)
        """
        self.params = params or Parameters()
        self.visualizer = RouteVisualizer()
        self.last_result: Optional[SimulationResult] = None
        self.app = web.Application()
        self._setup_routes()

    def _setup_routes(self):
        """Configure routes."""
        # Pages
        self.app.router.add_get("/", self.index)

        # API
        self.app.router.add_get("/api/status", self.api_status)
        self.app.router.add_post("/api/run", self.api_run)

        # Runtime parameters
        self.app.router.add_get("/api/params", self.api_params_get)
        self.app.router.add_post("/api/params", self.api_params_set)

        # Images
        self.app.router.add_get("/api/route.jpg", self.route_image)

    async def index(self, request):
        """Dashboard page."""
        html = self._render_template("index.html")
        return web.Response(text=html, content_type="text/html")

    async def api_status(self, request):
        """Get summary of the last run."""
        status = {
            "state": "IDLE",
            "hour": 0,
            "arrived": False,
            "distance": None,
        }

        result = self.last_result
        if result is not None:
            status["state"] = result.outcome.name
            status["hour"] = result.hours
            status["arrived"] = result.arrived
            status["distance"] = result.final_state.distance_to_destination

        return web.json_response(status)

    async def api_run(self, request):
        """Run a simulation from posted coordinates."""
        try:
            data = await request.json()
        except ValueError:
            return web.json_response({"error": "Body must be JSON"}, status=400)

        try:
            initial_state = self._parse_state(data)
            result = SimulationDriver(self.params).run(initial_state)
        except InvalidInputError as e:
            return web.json_response({"error": str(e)}, status=400)

        self.last_result = result
        return web.json_response(result.to_dict())

    async def api_params_get(self, request):
        """Get current runtime parameters."""
        return web.json_response(self.params.to_dict())

    async def api_params_set(self, request):
        """Update runtime parameters."""
        try:
            data = await request.json()
        except ValueError:
            return web.json_response({"error": "Body must be JSON"}, status=400)
        if not isinstance(data, dict):
            return web.json_response({"error": "Body must be a JSON object"}, status=400)

        self.params.update(**data)
        logger.info(f"Parameters updated: {sorted(data)}")
        return web.json_response(self.params.to_dict())

    async def route_image(self, request):
        """JPEG of the last run's route."""
        result = self.last_result
        if result is None:
            jpeg = self.visualizer.render(None)
        else:
            jpeg = self.visualizer.render(
                result.route,
                state_name=result.outcome.name,
                hour=result.hours,
            )
        return web.Response(body=jpeg, content_type="image/jpeg")

    @staticmethod
    def _parse_state(data) -> NavigationState:
        """Build the initial state from {"current": [..], "destination": [..]}."""
        if not isinstance(data, dict):
            raise InvalidInputError("Body must be a JSON object")
        try:
            lat, lon = data["current"]
            dest_lat, dest_lon = data["destination"]
        except (KeyError, TypeError, ValueError):
            raise InvalidInputError(
                "Expected 'current' and 'destination' as [latitude, longitude]"
            ) from None
        return NavigationState(lat, lon, dest_lat, dest_lon)

    def _render_template(self, name: str) -> str:
        """Render a template file."""
        template_path = TEMPLATES_DIR / name
        if template_path.exists():
            return template_path.read_text()

        # Fallback if template doesn't exist
        return f"""
        <!DOCTYPE html>
        <html>
        <head><title>Drive Cycle - {name}</title></head>
        <body>
            <h1>Drive Cycle Debug Interface</h1>
            <p>Template '{name}' not found. Create it at:</p>
            <pre>{template_path}</pre>
            <nav>
                <a href="/api/status">Status</a> |
                <a href="/api/params">Parameters</a> |
                <a href="/api/route.jpg">Route</a>
            </nav>
        </body>
        </html>
        """


def create_app(params: Optional[Parameters] = None) -> web.Application:
    """Create the web application."""
    server = WebServer(params)
    return server.app


async def run_server(params: Optional[Parameters] = None, host=WEB_HOST, port=WEB_PORT):
    """Run the web server."""
    app = create_app(params)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"Web server running at http://{host}:{port}")
    return runner
