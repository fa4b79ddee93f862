"""Example FastAPI app serving JSON:API documents built by the mapper.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload

Try:
    /api/v1/articles?include=comments&page[limit]=2
    /api/v1/articles/1?include=author
"""
from __future__ import annotations

from typing import Any, AsyncGenerator

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy import Column, ForeignKey, Integer, String, func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, relationship, selectinload, sessionmaker

from jsonapi_mapper import Mapper
from jsonapi_mapper.utils import mapping_options_from_request

DATABASE_URL = "sqlite+aiosqlite:///./jsonapi_example.db"
JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

engine = create_async_engine(DATABASE_URL, echo=True)
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    article = relationship("Article", back_populates="comments")


mapper = Mapper("http://localhost:8000/api/v1", {"jsonapi": {"version": "1.1"}})

LOADERS = {
    "author": selectinload(Article.author),
    "comments": selectinload(Article.comments),
}


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


async def seed_example_data(session: AsyncSession) -> None:
    """Insert example users, articles and comments if empty."""
    result = await session.execute(select(User.id).limit(1))
    if result.first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com")
    john = User(name="John Smith", email="john.smith@example.com")
    session.add_all(
        [
            Article(
                title="JSON:API with FastAPI",
                body="An example article using JSON:API patterns.",
                author=jane,
                comments=[Comment(body="Great article!"), Comment(body="Helpful examples.")],
            ),
            Article(
                title="Filtering relationships",
                body="Demonstrating relation filters.",
                author=john,
                comments=[Comment(body="Thanks for sharing.")],
            ),
            Article(
                title="Pagination links",
                body="How page[offset] and page[limit] drive links.",
                author=jane,
            ),
        ]
    )
    await session.commit()


def eager_options(request: Request) -> list[Any]:
    """Return loader options for the relations named in ``include``."""
    include = request.query_params.get("include")
    if include is None:
        return []
    names = {path.split(".")[0] for path in include.split(",") if path}
    return [loader for name, loader in LOADERS.items() if name in names]


def jsonapi_response(document: dict[str, Any]) -> JSONResponse:
    return JSONResponse(document, media_type=JSONAPI_MEDIA_TYPE)


app = FastAPI(
    title="JSON:API Mapper Example",
    description="Example API rendering SQLAlchemy records as JSON:API v1.1 documents.",
    version="0.1.0",
)
router = APIRouter(prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)


@router.get("/articles")
async def list_articles(
    request: Request, session: AsyncSession = Depends(get_session)
) -> JSONResponse:
    total = await session.scalar(select(func.count()).select_from(Article))
    options = mapping_options_from_request(request, total=total)
    statement = (
        select(Article)
        .options(*eager_options(request))
        .order_by(Article.id)
        .offset(options.pagination.offset)
        .limit(options.pagination.limit)
    )
    articles = (await session.scalars(statement)).all()
    return jsonapi_response(mapper.map(list(articles), "articles", options))


@router.get("/articles/{resource_id}")
async def retrieve_article(
    resource_id: int, request: Request, session: AsyncSession = Depends(get_session)
) -> JSONResponse:
    statement = select(Article).options(*eager_options(request)).where(Article.id == resource_id)
    article = await session.scalar(statement)
    if article is None:
        raise HTTPException(status_code=404, detail="Resource not found.")
    options = mapping_options_from_request(request)
    return jsonapi_response(mapper.map(article, "articles", options))


app.include_router(router)
