"""
Example leaderboard app using hyperhtml with FastAPI.

Run with:
    uvicorn examples.app:app --reload
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel

from hyperhtml import html_root, hyper_render, include_file, pre_render, text, text_raw, with_attributes
from hyperhtml.elements import (
    a,
    body,
    div,
    footer,
    h1,
    h2,
    head,
    li,
    link,
    main,
    meta_,
    nav,
    p,
    section,
    strong,
    table,
    tbody,
    td,
    th,
    thead,
    title,
    tr,
    ul,
)
from hyperhtml.fastapi import HTMLRoute


router = APIRouter(route_class=HTMLRoute)

STATIC = Path(__file__).parent / "static"


# Models


class User(BaseModel):
    id: int
    username: str
    points: int = 0
    commits: int = 0


@dataclass
class Stats:
    total_commits: int
    participants: int
    days_remaining: int


# Fake async data layer


async def get_leaderboard(q: str = "") -> list[User]:
    users = [
        User(id=2, username="alice", points=1200, commits=98),
        User(id=1, username="bob", points=420, commits=42),
        User(id=3, username="charlie", points=380, commits=35),
    ]
    if q:
        users = [u for u in users if q.lower() in u.username.lower()]
    return users


async def get_stats() -> Stats:
    return Stats(total_commits=175, participants=3, days_remaining=12)


# Components

container = with_attributes(main, {"class": "container"})
stat_card = with_attributes(div, {"class": ["card", "stat"]})

# Rendered once at import, spliced into every page
site_nav = pre_render(
    nav(
        {"class": "container"},
        ul(li(strong(text("Leaderboard")))),
        ul(li(a({"href": "/"}, text("Home"))), li(a({"href": "/stats"}, text("Stats")))),
    )
)
site_footer = pre_render(footer({"class": "container"}, p(text("Built with hyperhtml"))))


def layout(page_title: str, *content):
    return html_root(
        None,
        head(
            meta_({"charset": "utf-8"}),
            title(text(page_title)),
            link({"rel": "stylesheet", "href": "https://cdn.jsdelivr.net/npm/@picocss/pico@2/css/pico.min.css"}),
        ),
        body(site_nav, container(*content), site_footer),
    )


def leaderboard_table(users: list[User]):
    rows = [
        tr(td(text(str(rank))), td(text(user.username)), td(text(str(user.points))))
        for rank, user in enumerate(users, start=1)
    ]
    return table(
        thead(tr(th(text("#")), th(text("User")), th(text("Points")))),
        # Rows are independent, render them side by side
        tbody(hyper_render(*rows)),
    )


# Routes


@router.get("/")
async def home(q: str = ""):
    users = await get_leaderboard(q)
    return layout(
        "Leaderboard",
        h1(text("Leaderboard")),
        leaderboard_table(users) if users else p(text(f"No users match '{q}'")),
    )


@router.get("/stats")
async def stats():
    data = await get_stats()
    return layout(
        "Stats",
        h2(text("This month")),
        section(
            {"class": "grid"},
            stat_card(text(f"{data.total_commits} commits")),
            stat_card(text(f"{data.participants} participants")),
            stat_card(text(f"{data.days_remaining} days left")),
        ),
        text_raw("<!-- stats are refreshed hourly -->"),
    )


@router.get("/about")
async def about():
    # Read on every request; missing file surfaces as a 500
    return layout("About", include_file(STATIC / "about.html"))


app = FastAPI()
app.include_router(router)
