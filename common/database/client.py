import os
from dotenv import load_dotenv

from fastapi import Request
from supabase import AsyncClient, acreate_client

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE = os.getenv("SUPABASE_SERVICE_ROLE_KEY")


# Opened once by the app lifespan, closed on shutdown.
async def open_client() -> AsyncClient:
    return await acreate_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE)


async def close_client(client: AsyncClient) -> None:
    await client.postgrest.aclose()


# Request dependency: hands out the client owned by the running app.
async def get_db(request: Request) -> AsyncClient:
    return request.app.state.db
