"""
Locust load script for the InkMatch gallery.

Simulates anonymous viewers:
- Browse the gallery (/api/v1/tattoos)
- Toggle likes on random tattoos (cookie-scoped viewer id)
- Fetch their top artists (/api/v1/artists/top)
- Occasionally open an artist page and its tattoos

Configure with env vars or Locust UI:
- HOST: pass via `--host http://localhost:8000`
- INKMATCH_TOP_LIMIT: limit passed to /artists/top (default 5)
- INKMATCH_TAB_RACE=1: fire two toggles back-to-back for the same viewer
  to exercise last-writer-wins on the likes document

Run:
  locust -f load/locustfile.py --host http://localhost:8000
"""

from __future__ import annotations

import os
import random
from typing import Dict, List

from locust import HttpUser, task, between


# --- Config -------------------------------------------------------------------

TOP_LIMIT = int(os.getenv("INKMATCH_TOP_LIMIT", "5") or 5)
TAB_RACE = os.getenv("INKMATCH_TAB_RACE", "0").strip().lower() in {"1", "true", "yes"}


# --- Helpers ------------------------------------------------------------------

def _safe_json(resp, default):
    try:
        return resp.json()
    except ValueError:
        return default


# --- The User Model -----------------------------------------------------------

class GalleryViewer(HttpUser):
    wait_time = between(1, 3)

    tattoo_ids: List[str] = []
    artist_ids: List[str] = []

    def on_start(self):
        # First request issues the viewer cookie; the session keeps it.
        self.client.get("/api/v1/likes", name="/likes")
        self.tattoo_ids = []
        self.artist_ids = []
        self.browse()

    # ---- tasks ----

    @task(4)
    def browse(self):
        r = self.client.get("/api/v1/tattoos", name="/tattoos")
        if r.status_code != 200:
            return
        items: List[Dict] = _safe_json(r, [])
        self.tattoo_ids = [t["id"] for t in items if t.get("id")]
        self.artist_ids = sorted({t["artistId"] for t in items if t.get("artistId")})

    @task(8)
    def toggle_like(self):
        if not self.tattoo_ids:
            return
        picks = random.sample(self.tattoo_ids, k=min(2 if TAB_RACE else 1, len(self.tattoo_ids)))
        for tattoo_id in picks:
            self.client.post(f"/api/v1/likes/{tattoo_id}/toggle", name="/likes/[id]/toggle")

    @task(3)
    def top_artists(self):
        self.client.get("/api/v1/artists/top", params={"limit": TOP_LIMIT}, name="/artists/top")

    @task(1)
    def artist_page(self):
        if not self.artist_ids:
            return
        artist_id = random.choice(self.artist_ids)
        self.client.get(f"/api/v1/artists/{artist_id}", name="/artists/[id]")
        self.client.get(f"/api/v1/artists/{artist_id}/tattoos", name="/artists/[id]/tattoos")
