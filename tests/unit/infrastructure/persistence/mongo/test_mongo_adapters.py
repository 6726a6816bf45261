from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from storefront_api.core.application.exceptions import DuplicateKeyError, StorageError
from storefront_api.core.domain.catalog import Product, ProductQuery, ProductSort
from storefront_api.core.domain.identity import User
from storefront_api.core.domain.ordering import Order, OrderLine
from storefront_api.infrastructure.configuration.database_settings import DatabaseSettings
from storefront_api.infrastructure.persistence.mongo import (
    MongoConnection,
    MongoProductRepository,
    MongoUnitOfWork,
    MongoUserRepository,
)
from storefront_api.infrastructure.persistence.mongo.document_mappers import (
    order_from_document,
    order_to_document,
    product_changes_to_document,
    product_from_document,
    product_to_document,
)
from storefront_api.infrastructure.persistence.mongo.mongo_product_repository import build_filter
from storefront_api.infrastructure.persistence.mongo.mongo_user_repository import duplicate_field


def test_search_filter_escapes_regex():
    conditions = build_filter(ProductQuery(search="c++ (pro)", category="tools"))
    assert conditions == {
        "name": {"$regex": r"c\+\+\ \(pro\)", "$options": "i"},
        "category": "tools",
    }
    assert build_filter(ProductQuery()) == {}


def test_product_documents_use_api_field_names():
    product = Product("Lamp", "LED", 9.5, 2, "home", user_id="admin-1")

    doc = product_to_document(product)

    assert doc["id"] == product.id
    assert doc["userId"] == "admin-1"
    assert "user_id" not in doc
    assert product_from_document(doc) == product
    assert product_changes_to_document({"updated_at": 1}) == {"updatedAt": 1}
    with pytest.raises(ValueError):
        product_changes_to_document({"id": "x"})


def test_order_documents_keep_line_totals():
    order = Order.place("u1", [OrderLine("p1", "Pen", "Blue", quantity=2, price=1.25)])

    doc = order_to_document(order)

    assert doc["totalPrice"] == 2.5
    assert doc["products"][0]["itemTotal"] == 2.5
    assert order_from_document(doc).lines == order.lines


def test_search_sorts_with_id_tiebreaker():
    database = MagicMock()
    collection = database.products
    collection.count_documents.return_value = 0
    cursor = collection.find.return_value.sort.return_value.skip.return_value.limit.return_value
    cursor.__iter__.return_value = iter([])

    page = MongoProductRepository(database).search(
        ProductQuery(page=2, page_size=5, sort=ProductSort.PRICE_ASC)
    )

    collection.find.return_value.sort.assert_called_once_with([("price", 1), ("id", 1)])
    collection.find.return_value.sort.return_value.skip.assert_called_once_with(5)
    assert page.total_size == 0


def test_decrement_stock_is_a_guarded_increment():
    database = MagicMock()
    database.products.update_one.return_value.modified_count = 1

    assert MongoProductRepository(database).decrement_stock("p1", 3)

    query, update = database.products.update_one.call_args.args
    assert query == {"id": "p1", "stock": {"$gte": 3}}
    assert update["$inc"] == {"stock": -3}


def test_duplicate_key_maps_to_field():
    error = MongoDuplicateKeyError(
        "E11000 duplicate key", 11000, {"keyPattern": {"username": 1}}
    )
    assert duplicate_field(error) == "username"
    assert duplicate_field(MongoDuplicateKeyError("index: email_1 dup key", 11000)) == "email"

    database = MagicMock()
    database.users.insert_one.side_effect = error
    with pytest.raises(DuplicateKeyError) as exc:
        MongoUserRepository(database).add(User("ana", "ana@example.com", "x"))
    assert exc.value.field == "username"


def test_connection_ping_failure_is_a_storage_error():
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    settings = DatabaseSettings(_env_file=None, mongodb_connect_attempts=1)

    connection = MongoConnection(settings, client=client)

    with pytest.raises(StorageError) as exc:
        connection.connect()
    assert exc.value.message == "Database connection failed"
    assert not connection.is_healthy()


def test_connect_creates_indexes():
    client = MagicMock()
    connection = MongoConnection(DatabaseSettings(_env_file=None), client=client)

    connection.connect()

    users = client.__getitem__.return_value.users
    users.create_index.assert_any_call("email", unique=True)
    users.create_index.assert_any_call("username", unique=True)


def test_unit_of_work_wraps_database_errors():
    client = MagicMock()
    session = client.start_session.return_value.__enter__.return_value
    session.with_transaction.side_effect = OperationFailure("Transaction numbers are only allowed")

    with pytest.raises(StorageError) as exc:
        MongoUnitOfWork(client, MagicMock()).run(lambda tx: None)
    assert exc.value.message == "Transaction failed"


def test_unit_of_work_uses_session_transaction():
    client = MagicMock()
    session = client.start_session.return_value.__enter__.return_value
    session.with_transaction.side_effect = lambda callback, **kwargs: callback(session)

    result = MongoUnitOfWork(client, MagicMock()).run(lambda tx: tx.products.session)

    assert result is session
