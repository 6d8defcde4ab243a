"""Sample listings written on first start."""

import structlog

from src.api.schemas.books import BookRecord
from src.core.books.repository import utc_now_iso
from src.core.books.store import BookStore

logger = structlog.get_logger(__name__)

SAMPLE_BOOKS = [
    {
        "id": "sample1",
        "title": "三体",
        "author": "刘慈欣",
        "uploader": "小杨",
        "contact": "yby666@example.com",
    },
    {
        "id": "sample2",
        "title": "新大学英语 视听说教程 第二版 2",
        "author": "潘海英",
        "uploader": "小马",
        "contact": "qq:1314520886",
    },
    {
        "id": "sample3",
        "title": "工程力学 上册(机械工业出版社)",
        "author": "蔡广新 邹春伟",
        "uploader": "小王",
        "contact": "139131411314",
    },
    {
        "id": "sample4",
        "title": "新大学英语 读写教程 第二版 2 思政智慧版",
        "author": "郑树棠",
        "uploader": "小徐",
        "contact": "vx:wobuyaogun_678",
    },
    {
        "id": "sample5",
        "title": "工业设计史 第五版",
        "author": "何人可",
        "uploader": "小刘",
        "contact": "aiwanpubg998@example.com",
    },
    {
        "id": "sample6",
        "title": "中国近代史纲要 2023版",
        "author": "本书编写组",
        "uploader": "小姚",
        "contact": "vx:noblearchitecturestudent",
    },
]


def seed_sample_books(store: BookStore) -> bool:
    """Write the sample listings if the catalog is empty. Returns True if seeded."""
    if store.read():
        return False

    created_at = utc_now_iso()
    books = [BookRecord(**sample, created_at=created_at) for sample in SAMPLE_BOOKS]
    seeded = store.write(books)
    if seeded:
        logger.info("Seeded sample books", count=len(books))
    return seeded
