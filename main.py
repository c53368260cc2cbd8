from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

import config
from calculator.router import router as calculator_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="FX Lot Size Calculator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(calculator_router)


@app.get("/")
def root():
    return RedirectResponse(url="/calculateLotSize")


@app.get("/health")
def health():
    return {"status": "Backend running"}


if __name__ == "__main__":
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
