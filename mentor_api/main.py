from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mentor_api.api import briefings, mentor, skills
from mentor_api.core.config import settings
from mentor_api.core.errors import register_error_handlers
from mentor_api.core.log_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Junior Analyst Mentor API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include Router
app.include_router(mentor.router, prefix="/api", tags=["Mentor"])
app.include_router(skills.router, prefix="/api", tags=["Skills path"])
app.include_router(briefings.router, prefix="/api", tags=["Briefings"])

# Health check
@app.get("/")
def read_root():
    return {"status": "running"}
