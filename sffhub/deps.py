# sffhub/deps.py
import os

from fastapi import Depends
from supabase import create_client, Client

from .services.buyer_requests import RequestManager
from .services.jobs import JobManager
from .services.templates import TemplateManager
from .store import SupabaseStore


# ──────────────────────────────────────────────────────────────────────────────
# Supabase client (service role so it bypasses RLS on the server)
#   SUPABASE_URL=https://YOUR-PROJECT-REF.supabase.co
#   SUPABASE_SERVICE_ROLE=eyJhbGciOiJI...  (service role key)
# ──────────────────────────────────────────────────────────────────────────────
def get_supabase() -> Client:
    url = os.environ.get("SUPABASE_URL")
    key = os.environ.get("SUPABASE_SERVICE_ROLE")
    if not url or not key:
        raise RuntimeError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE")
    return create_client(url, key)


def get_store(client: Client = Depends(get_supabase)) -> SupabaseStore:
    return SupabaseStore(client)


def get_request_manager(store: SupabaseStore = Depends(get_store)) -> RequestManager:
    return RequestManager(store)


def get_job_manager(store: SupabaseStore = Depends(get_store)) -> JobManager:
    return JobManager(store)


def get_template_manager(store: SupabaseStore = Depends(get_store)) -> TemplateManager:
    return TemplateManager(store)
