"""FastAPI application for the mdlistsort HTTP host."""

from fastapi import FastAPI

from server.routers import router

app = FastAPI(
    title="mdlistsort",
    description="Sort nested markdown lists around a cursor.",
)
app.include_router(router)
