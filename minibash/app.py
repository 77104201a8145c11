"""
FastAPI application exposing the directory lister over HTTP.
"""

from fastapi import FastAPI

from minibash.api.routers import router as api_router

app = FastAPI(title="minibash")
app.include_router(api_router)
