import logging

from fastapi import FastAPI

from weekmenu.events.web_observers import start as start_event_observers
from weekmenu.api.routes import recipes, rules, sample_weeks, menu, history
from weekmenu.utilities.config import DEBUG

# Logging
logger = logging.getLogger("weekmenu_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu Planner API", debug=DEBUG)

# Include routers
app.include_router(recipes.router)
app.include_router(rules.router)
app.include_router(sample_weeks.router)
app.include_router(menu.router)
app.include_router(history.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for menu reveal events when the app starts."""
    start_event_observers()
    logger.info("Web observers for menu events started")


@app.get("/api/health")
def health():
    return {"status": "ok"}
