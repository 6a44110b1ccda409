from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from badgeworks.core.config import settings
from badgeworks.core.logging_config import configure_logging
from badgeworks.core.settings_static import MEDIA_DIR, MEDIA_URL_PREFIX
from badgeworks.db import Base, engine
import badgeworks.models  # noqa: F401  registra las tablas en Base.metadata

from badgeworks.routers import admin as admin_router
from badgeworks.routers import auth as auth_router
from badgeworks.routers import public as public_router

configure_logging()
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

# /media -> imágenes procesadas cuando STORAGE_BACKEND=local
app.mount(MEDIA_URL_PREFIX, StaticFiles(directory=str(MEDIA_DIR)), name="media")

# ==== CORS ====
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 400 con el detalle de pydantic (no 422)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# ==== Routers ====
app.include_router(auth_router.router)
app.include_router(admin_router.router)
app.include_router(public_router.router)


@app.get("/health")
def health():
    return {"status": "ok"}
