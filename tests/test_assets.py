from __future__ import annotations

import unittest
from unittest import mock

from botocore.exceptions import ClientError, EndpointConnectionError

from condo_notifier.adapters import object_store
from condo_notifier.adapters.fake_senders import make_in_memory_list_keys
from condo_notifier.config import StoreConfig
from condo_notifier.domain.assets import (
    AssetLocator,
    build_asset_url,
    encode_object_key,
    matches_size,
)
from condo_notifier.errors import StoreError


def make_config(**overrides: object) -> StoreConfig:
    base: dict[str, object] = {"bucket": "bl-whatsapp", "public_host": "zynarvis.com"}
    return StoreConfig(**(base | overrides))


class RecordingLister:
    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        self.calls: list[tuple[str, str]] = []

    def __call__(self, bucket: str, prefix: str) -> list[str]:
        self.calls.append((bucket, prefix))
        return list(self.keys)


class EncodingTests(unittest.TestCase):
    def test_encode_object_key_encodes_whitespace_and_keeps_slashes(self) -> None:
        self.assertEqual(
            encode_object_key("Alpha/200sqft living room.jpg"),
            "Alpha/200sqft%20living%20room.jpg",
        )

    def test_encode_object_key_does_not_double_encode(self) -> None:
        key = "Alpha/200sqft living%20room.jpg"

        encoded = encode_object_key(key)

        self.assertEqual(encoded, "Alpha/200sqft%20living%20room.jpg")
        self.assertEqual(encode_object_key(encoded), encoded)

    def test_encode_object_key_escapes_unsafe_characters(self) -> None:
        self.assertEqual(
            encode_object_key("Alpha/100% view #2?.jpg"),
            "Alpha/100%25%20view%20%232%3F.jpg",
        )

    def test_build_asset_url_accepts_host_with_scheme(self) -> None:
        self.assertEqual(
            build_asset_url("https://cdn.example.com/", "A/b c.jpg"),
            "https://cdn.example.com/A/b%20c.jpg",
        )

    def test_matches_size_is_substring_match(self) -> None:
        self.assertTrue(matches_size("Alpha/135sqft bed.jpg", "35"))
        self.assertFalse(matches_size("Alpha/350sqft bed.jpg", "35"))
        self.assertTrue(matches_size("Alpha/350sqft bed.jpg", "350"))
        self.assertFalse(matches_size("Alpha/350 sqft bed.jpg", "350"))
        self.assertFalse(matches_size("Alpha/200sqft bed.jpg", "350"))


class AssetLocatorTests(unittest.TestCase):
    def test_locate_returns_encoded_urls_for_matching_keys(self) -> None:
        lister = RecordingLister(["Alpha/200sqft living.jpg", "Alpha/350sqft bed.jpg"])
        locator = AssetLocator(make_config(), lister)

        urls = locator.locate("Alpha", "200")

        self.assertEqual(urls, ["https://zynarvis.com/Alpha/200sqft%20living.jpg"])
        self.assertEqual(lister.calls, [("bl-whatsapp", "Alpha/")])

    def test_locate_preserves_listing_order(self) -> None:
        lister = RecordingLister(
            ["Alpha/650sqft z.jpg", "Alpha/650sqft a.jpg", "Alpha/650sqft m.jpg"]
        )
        locator = AssetLocator(make_config(), lister)

        urls = locator.locate("Alpha", "650")

        self.assertEqual(
            urls,
            [
                "https://zynarvis.com/Alpha/650sqft%20z.jpg",
                "https://zynarvis.com/Alpha/650sqft%20a.jpg",
                "https://zynarvis.com/Alpha/650sqft%20m.jpg",
            ],
        )

    def test_locate_ignores_keys_outside_property_prefix(self) -> None:
        lister = RecordingLister(["Alpha/200sqft a.jpg", "Alphabet/200sqft b.jpg"])
        locator = AssetLocator(make_config(), lister)

        urls = locator.locate("Alpha", "200")

        self.assertEqual(urls, ["https://zynarvis.com/Alpha/200sqft%20a.jpg"])

    def test_locate_keeps_substring_false_positives(self) -> None:
        locator = AssetLocator(
            make_config(),
            make_in_memory_list_keys(
                ["Alpha/135sqft bed.jpg", "Alpha/350sqft bed.jpg", "Alpha/35sqft store.jpg"]
            ),
        )

        urls = locator.locate("Alpha", "35")

        self.assertEqual(
            urls,
            [
                "https://zynarvis.com/Alpha/135sqft%20bed.jpg",
                "https://zynarvis.com/Alpha/35sqft%20store.jpg",
            ],
        )

    def test_locate_empty_listing_returns_empty_list(self) -> None:
        locator = AssetLocator(make_config(), RecordingLister([]))

        self.assertEqual(locator.locate("Alpha", "200"), [])

    def test_locate_rejects_empty_property_id(self) -> None:
        lister = RecordingLister(["Alpha/200sqft a.jpg"])
        locator = AssetLocator(make_config(), lister)

        with self.assertRaises(ValueError):
            locator.locate("", "200")
        self.assertEqual(lister.calls, [])

    def test_locate_store_failure_raises_opaque_store_error(self) -> None:
        def failing_lister(bucket: str, prefix: str) -> list[str]:
            raise ClientError(
                {"Error": {"Code": "AccessDenied", "Message": "secret detail"}},
                "ListObjectsV2",
            )

        locator = AssetLocator(make_config(), failing_lister)

        with self.assertLogs("condo_notifier.domain.assets", level="ERROR") as logs:
            with self.assertRaises(StoreError) as exc:
                locator.locate("Alpha", "200")

        self.assertEqual(str(exc.exception), "failed to search images")
        self.assertNotIn("secret detail", str(exc.exception))
        self.assertIn("AccessDenied", "\n".join(logs.output))

    def test_locate_transport_failure_raises_store_error(self) -> None:
        def failing_lister(bucket: str, prefix: str) -> list[str]:
            raise EndpointConnectionError(endpoint_url="https://r2.example.com")

        locator = AssetLocator(make_config(), failing_lister)

        with self.assertLogs("condo_notifier.domain.assets", level="ERROR"):
            with self.assertRaises(StoreError):
                locator.locate("Alpha", "200")


class ObjectStoreAdapterTests(unittest.TestCase):
    def test_list_object_keys_reads_single_page(self) -> None:
        client = mock.Mock()
        client.list_objects_v2.return_value = {
            "Contents": [{"Key": "Alpha/200sqft a.jpg"}, {"Key": "Alpha/350sqft b.jpg"}, {}],
            "IsTruncated": True,
            "NextContinuationToken": "token-2",
        }

        keys = object_store.list_object_keys(client, "bl-whatsapp", "Alpha/")

        self.assertEqual(keys, ["Alpha/200sqft a.jpg", "Alpha/350sqft b.jpg"])
        client.list_objects_v2.assert_called_once_with(Bucket="bl-whatsapp", Prefix="Alpha/")

    def test_list_object_keys_without_contents_returns_empty_list(self) -> None:
        client = mock.Mock()
        client.list_objects_v2.return_value = {"KeyCount": 0}

        self.assertEqual(object_store.list_object_keys(client, "bl-whatsapp", "Alpha/"), [])

    def test_make_list_keys_binds_client(self) -> None:
        client = mock.Mock()
        client.list_objects_v2.return_value = {"Contents": [{"Key": "Alpha/200sqft a.jpg"}]}
        locator = AssetLocator(make_config(), object_store.make_list_keys(client))

        urls = locator.locate("Alpha", "200")

        self.assertEqual(urls, ["https://zynarvis.com/Alpha/200sqft%20a.jpg"])

    @mock.patch("condo_notifier.adapters.object_store.boto3.client")
    def test_build_store_client_uses_configured_endpoint(self, client_mock: mock.Mock) -> None:
        config = make_config(
            endpoint_url="https://account.r2.cloudflarestorage.com",
            access_key_id="key-id",
            secret_access_key="secret",
        )

        object_store.build_store_client(config)

        client_mock.assert_called_once()
        self.assertEqual(client_mock.call_args.args, ("s3",))
        kwargs = client_mock.call_args.kwargs
        self.assertEqual(kwargs["endpoint_url"], "https://account.r2.cloudflarestorage.com")
        self.assertEqual(kwargs["aws_access_key_id"], "key-id")
        self.assertEqual(kwargs["aws_secret_access_key"], "secret")
        self.assertEqual(kwargs["region_name"], "auto")
        self.assertEqual(kwargs["config"].signature_version, "s3v4")


if __name__ == "__main__":
    unittest.main()
