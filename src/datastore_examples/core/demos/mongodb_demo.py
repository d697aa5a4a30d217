"""
목적: MongoDB(pymongo) 호출 예제를 제공한다.
설명: CRUD, 쿼리/업데이트/배열 연산자, 집계 파이프라인, 인덱스, 벌크/원자적 find 계열, 게시글 반응(reactions) 관리를 순서대로 실행한다.
디자인 패턴: 템플릿 메서드 패턴
참조: src/datastore_examples/core/demos/base.py, src/datastore_examples/integrations/db/engines/mongodb/connection.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DeleteOne, IndexModel, InsertOne, ReturnDocument, UpdateOne
from pymongo.collection import Collection

from datastore_examples.core.demos.base import BaseDemo, DemoStep
from datastore_examples.integrations.db.engines.mongodb import MongoConnectionManager
from datastore_examples.shared.config import MongoSettings
from datastore_examples.shared.logging import Logger


def _update_summary(result: Any) -> Dict[str, Any]:
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
        "upserted_id": result.upserted_id,
    }


class MongoDemo(BaseDemo):
    """MongoDB 데모."""

    def __init__(
        self,
        settings: Optional[MongoSettings] = None,
        logger: Optional[Logger] = None,
        connection: Optional[MongoConnectionManager] = None,
        run_id: Optional[str] = None,
    ) -> None:
        super().__init__(logger=logger, run_id=run_id)
        self._settings = settings or MongoSettings()
        self._connection = connection or MongoConnectionManager(
            uri=self._settings.resolve_uri(),
            database_name=self._settings.database,
            write_concern=self._settings.write_concern,
            logger=self._logger,
        )

    @property
    def store(self) -> str:
        return "mongodb"

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def steps(self) -> List[DemoStep]:
        steps: List[DemoStep] = []
        if self._settings.reset_collection:
            steps.append(DemoStep("reset_collection", self.reset_collection))
        steps.extend(
            [
                DemoStep(
                    "create_document",
                    lambda: self.create_document({"name": "Alice", "age": 25}),
                ),
                DemoStep(
                    "create_documents",
                    lambda: self.create_documents(
                        [{"name": "Bob", "age": 30}, {"name": "Charlie", "age": 35}]
                    ),
                ),
                DemoStep("read_document", lambda: self.read_document({"name": "Alice"})),
                DemoStep("read_documents", lambda: self.read_documents({})),
                DemoStep(
                    "count_documents",
                    lambda: self.count_documents({"age": {"$gte": 25}}),
                ),
                DemoStep(
                    "update_document",
                    lambda: self.update_document({"name": "Alice"}, {"age": 26}),
                ),
                DemoStep(
                    "update_documents",
                    lambda: self.update_documents({"age": {"$gt": 25}}, {"age": 27}),
                ),
                DemoStep(
                    "replace_document",
                    lambda: self.replace_document({"name": "Bob"}, {"name": "Bob", "age": 31}),
                ),
                DemoStep("delete_document", lambda: self.delete_document({"name": "Charlie"})),
                DemoStep("delete_documents", lambda: self.delete_documents({"age": 27})),
                DemoStep("query_operators", self.query_operators),
                DemoStep("update_operators", self.update_operators),
                DemoStep("array_update_operators", self.array_update_operators),
                DemoStep("aggregation", self.aggregation),
                DemoStep("indexing", self.indexing),
                DemoStep("miscellaneous", self.miscellaneous),
                DemoStep("reactions", self.reactions),
            ]
        )
        return steps

    @property
    def _collection(self) -> Collection:
        return self._connection.ensure_collection(self._settings.collection)

    def reset_collection(self) -> None:
        self._collection.drop()
        self.log_result("drop collection", self._settings.collection)

    # CRUD

    def create_document(self, document: Dict[str, Any]) -> Any:
        result = self._collection.insert_one(document)
        self.log_result("Document inserted with _id", result.inserted_id)
        return result.inserted_id

    def create_documents(self, documents: List[Dict[str, Any]]) -> List[Any]:
        result = self._collection.insert_many(documents)
        self.log_result("Documents inserted with _ids", result.inserted_ids)
        return list(result.inserted_ids)

    def read_document(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        document = self._collection.find_one(query)
        self.log_result("Read document", document)
        return document

    def read_documents(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        documents = list(self._collection.find(query))
        self.log_result("Read documents", documents)
        return documents

    def count_documents(self, query: Dict[str, Any]) -> int:
        count = self._collection.count_documents(query)
        self.log_result("Count documents", count)
        return count

    def update_document(self, query: Dict[str, Any], update: Dict[str, Any]) -> None:
        result = self._collection.update_one(query, {"$set": update})
        self.log_result("Updated document", _update_summary(result))

    def update_documents(self, query: Dict[str, Any], update: Dict[str, Any]) -> None:
        result = self._collection.update_many(query, {"$set": update})
        self.log_result("Updated documents", _update_summary(result))

    def replace_document(self, query: Dict[str, Any], replacement: Dict[str, Any]) -> None:
        result = self._collection.replace_one(query, replacement)
        self.log_result("Replaced document", _update_summary(result))

    def delete_document(self, query: Dict[str, Any]) -> None:
        result = self._collection.delete_one(query)
        self.log_result("Deleted document count", result.deleted_count)

    def delete_documents(self, query: Dict[str, Any]) -> None:
        result = self._collection.delete_many(query)
        self.log_result("Deleted documents count", result.deleted_count)

    # 연산자

    def query_operators(self) -> None:
        query = {
            "age": {"$gte": 18, "$lte": 30},
            "name": {"$in": ["Alice", "Bob"]},
            "$or": [{"age": {"$lt": 25}}, {"name": {"$eq": "Charlie"}}],
            "$and": [{"age": {"$gt": 20}}, {"name": {"$ne": "Dave"}}],
            "reactions": {"$exists": True},
        }
        documents = list(self._collection.find(query))
        self.log_result("Query operator results", documents)

    def update_operators(self) -> None:
        # 같은 필드 경로를 건드리는 연산자는 한 업데이트 문서에 함께 둘 수 없다.
        updates = [
            {"$set": {"age": 26}},
            {"$unset": {"reactions": ""}},
            {"$inc": {"age": 1}},
            {"$rename": {"age": "years"}},
        ]
        for update in updates:
            result = self._collection.update_one({"name": "Alice"}, update)
            operator = next(iter(update))
            self.log_result(f"Update operator {operator}", _update_summary(result))

    def array_update_operators(self) -> None:
        updates = [
            {"$push": {"reactions": {"userId": "user3", "emoji": "😃"}}},
            {"$pull": {"reactions": {"userId": "user2"}}},
            {"$addToSet": {"reactions": {"userId": "user4", "emoji": "😎"}}},
            # 마지막 원소 제거
            {"$pop": {"reactions": 1}},
        ]
        for update in updates:
            result = self._collection.update_one({"name": "Alice"}, update)
            operator = next(iter(update))
            self.log_result(f"Array update operator {operator}", _update_summary(result))

    # 집계/인덱스

    def aggregation(self) -> None:
        pipeline = [
            {"$match": {"age": {"$gte": 18}}},
            {"$group": {"_id": "$age", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": 5},
            {"$skip": 1},
            {"$project": {"age": "$_id", "count": 1, "_id": 0}},
            {"$unwind": "$reactions"},
            {
                "$lookup": {
                    "from": self._settings.lookup_collection,
                    "localField": "name",
                    "foreignField": "name",
                    "as": "related_docs",
                }
            },
            {"$addFields": {"additionalField": "new value"}},
            {"$replaceRoot": {"newRoot": "$related_docs"}},
        ]
        documents = list(self._collection.aggregate(pipeline))
        self.log_result("Aggregation results", documents)

    def indexing(self) -> None:
        collection = self._collection
        created = collection.create_index([("name", ASCENDING)])
        self.log_result("Created index", created)

        created_many = collection.create_indexes(
            [
                IndexModel([("age", ASCENDING)]),
                IndexModel([("name", ASCENDING), ("age", ASCENDING)]),
            ]
        )
        self.log_result("Created indexes", created_many)

        indexes = list(collection.list_indexes())
        self.log_result("List indexes", indexes)

        collection.drop_index("name_1")
        self.log_result("Dropped index", "name_1")

        collection.drop_indexes()
        self.log_result("Dropped all indexes", True)

    # 기타

    def miscellaneous(self) -> None:
        collection = self._collection
        bulk_result = collection.bulk_write(
            [
                InsertOne({"name": "Eve", "age": 22}),
                UpdateOne({"name": "Alice"}, {"$set": {"age": 29}}),
                DeleteOne({"name": "Bob"}),
            ]
        )
        self.log_result("Bulk write result", bulk_result.bulk_api_result)

        distinct_values = collection.distinct("name")
        self.log_result("Distinct values", distinct_values)

        updated = collection.find_one_and_update(
            {"name": "Eve"},
            {"$set": {"age": 23}},
            return_document=ReturnDocument.AFTER,
        )
        self.log_result("Find one and update result", updated)

        deleted = collection.find_one_and_delete({"name": "Eve"})
        self.log_result("Find one and delete result", deleted)

        replaced = collection.find_one_and_replace({"name": "Alice"}, {"name": "Alice", "age": 30})
        self.log_result("Find one and replace result", replaced)

    # 게시글 반응

    def reactions(self) -> None:
        post_id = self.create_document({"name": "Post 1", "reactions": []})

        self.add_reaction(post_id, "user1", "👍")
        self.add_reaction(post_id, "user2", "❤️")
        # user1의 기존 반응을 교체한다.
        self.add_reaction(post_id, "user1", "😂")
        self.read_document({"_id": post_id})

        self.remove_reaction(post_id, "user1")
        self.read_document({"_id": post_id})

        self.delete_document({"_id": post_id})

    def add_reaction(self, post_id: Any, user_id: str, emoji: str) -> None:
        """사용자 반응을 추가하거나, 이미 있으면 이모지만 교체한다.

        Raises:
            LookupError: 게시글이 없는 경우.
        """

        collection = self._collection
        post = collection.find_one({"_id": post_id})
        if not post:
            raise LookupError(f"게시글을 찾을 수 없습니다: {post_id}")

        existing = any(
            reaction.get("userId") == user_id for reaction in post.get("reactions") or []
        )
        if existing:
            collection.update_one(
                {"_id": post_id, "reactions.userId": user_id},
                {"$set": {"reactions.$.emoji": emoji}},
            )
            self.log_result("Updated reaction", {"post_id": post_id, "user_id": user_id, "emoji": emoji})
            return
        collection.update_one(
            {"_id": post_id},
            {"$push": {"reactions": {"userId": user_id, "emoji": emoji}}},
        )
        self.log_result("Added reaction", {"post_id": post_id, "user_id": user_id, "emoji": emoji})

    def remove_reaction(self, post_id: Any, user_id: str) -> None:
        self._collection.update_one(
            {"_id": post_id},
            {"$pull": {"reactions": {"userId": user_id}}},
        )
        self.log_result("Removed reaction", {"post_id": post_id, "user_id": user_id})
