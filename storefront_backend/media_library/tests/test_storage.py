# media_library/tests/test_storage.py

from __future__ import annotations

import os
import re
import shutil
import tempfile
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase

from media_library.services import storage
from media_library.services.exceptions import MediaStorageError, MediaValidationError

MB = 1024 * 1024


def image(name="photo.jpg", size=16, content_type="image/jpeg"):
    return SimpleUploadedFile(name, b"x" * size, content_type=content_type)


class FileNameTests(SimpleTestCase):
    def test_generated_name_shape(self):
        name = storage.generate_file_name("Holiday Photo.JPG")
        self.assertRegex(name, r"^\d{13}-[0-9a-z]{7}\.jpg$")

    def test_missing_extension_is_bin(self):
        self.assertTrue(storage.generate_file_name("README").endswith(".bin"))
        self.assertTrue(storage.generate_file_name("").endswith(".bin"))

    def test_extension_is_sanitized(self):
        self.assertTrue(storage.generate_file_name("clip.m p4!").endswith(".mp4"))

    def test_names_do_not_repeat(self):
        names = {storage.generate_file_name("a.png") for _ in range(50)}
        self.assertEqual(len(names), 50)

    def test_reference_to_name(self):
        self.assertEqual(
            storage.file_name_from_reference(
                "https://cdn.example.com/media/product-images/1718000000000-abc1234.jpg?v=2"
            ),
            "1718000000000-abc1234.jpg",
        )
        self.assertEqual(storage.file_name_from_reference("a.png"), "a.png")

        for bad in ("", ".env", "folder\\photo.png"):
            with self.assertRaises(MediaValidationError):
                storage.file_name_from_reference(bad)


class ValidationTests(SimpleTestCase):
    def test_library_accepts_images_and_videos(self):
        storage.validate_upload(
            image(), max_bytes=10 * MB, allowed_prefixes=storage.LIBRARY_MIME_PREFIXES
        )
        storage.validate_upload(
            image("clip.mp4", content_type="video/mp4"),
            max_bytes=10 * MB,
            allowed_prefixes=storage.LIBRARY_MIME_PREFIXES,
        )

    def test_wrong_type_messages(self):
        doc = image("notes.txt", content_type="text/plain")

        with self.assertRaisesMessage(MediaValidationError, "Only image and video files are allowed"):
            storage.validate_upload(doc, max_bytes=10 * MB, allowed_prefixes=storage.LIBRARY_MIME_PREFIXES)

        clip = image("clip.mp4", content_type="video/mp4")
        with self.assertRaisesMessage(MediaValidationError, "Only image files are allowed"):
            storage.validate_upload(
                clip, max_bytes=5 * MB, allowed_prefixes=storage.PRODUCT_IMAGE_MIME_PREFIXES
            )

    def test_size_limits(self):
        with self.assertRaisesMessage(MediaValidationError, "File size must be less than 10MB"):
            storage.validate_upload(
                image(size=10 * MB + 1),
                max_bytes=10 * MB,
                allowed_prefixes=storage.LIBRARY_MIME_PREFIXES,
            )
        with self.assertRaisesMessage(MediaValidationError, "File size must be less than 5MB"):
            storage.validate_upload(
                image(size=5 * MB + 1),
                max_bytes=5 * MB,
                allowed_prefixes=storage.PRODUCT_IMAGE_MIME_PREFIXES,
            )

    def test_exact_limit_is_allowed(self):
        storage.validate_upload(
            image(size=5 * MB), max_bytes=5 * MB, allowed_prefixes=storage.PRODUCT_IMAGE_MIME_PREFIXES
        )

    def test_missing_content_type_is_guessed_from_name(self):
        upload = image("photo.png", content_type="")
        storage.validate_upload(
            upload, max_bytes=MB, allowed_prefixes=storage.PRODUCT_IMAGE_MIME_PREFIXES
        )


class FileSystemStorageTests(SimpleTestCase):
    """
    GUARANTEES:
    - Uploads land in the bucket directory under a generated name
    - Listing an absent bucket is empty, not an error
    - Deleting works by URL or bare name; missing files are fine
    - Backend failures surface as MediaStorageError
    """

    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)
        override = self.settings(
            MEDIA_ROOT=self.media_root, MEDIA_URL="/media/", MEDIA_BUCKET="product-images"
        )
        override.enable()
        self.addCleanup(override.disable)

    def _upload(self, upload=None):
        return storage.upload_file(
            upload or image(),
            max_bytes=10 * MB,
            allowed_prefixes=storage.LIBRARY_MIME_PREFIXES,
        )

    def test_upload_stores_in_bucket(self):
        url = self._upload()

        self.assertTrue(url.startswith("/media/product-images/"))
        name = url.rsplit("/", 1)[-1]
        self.assertTrue(re.match(r"^\d{13}-[0-9a-z]{7}\.jpg$", name))
        self.assertTrue(os.path.exists(os.path.join(self.media_root, "product-images", name)))

    def test_rejected_upload_stores_nothing(self):
        with self.assertRaises(MediaValidationError):
            self._upload(image("notes.txt", content_type="text/plain"))

        self.assertFalse(os.path.exists(os.path.join(self.media_root, "product-images")))

    def test_list_empty_bucket(self):
        self.assertEqual(storage.list_files(), [])

    def test_list_and_delete(self):
        first = self._upload()
        second = self._upload(image("clip.mp4", content_type="video/mp4"))

        listed = storage.list_files()
        self.assertEqual(
            {entry["name"] for entry in listed},
            {first.rsplit("/", 1)[-1], second.rsplit("/", 1)[-1]},
        )
        self.assertTrue(all(entry["url"].startswith("/media/product-images/") for entry in listed))

        self.assertEqual(storage.delete_file(first), first.rsplit("/", 1)[-1])
        self.assertEqual(len(storage.list_files()), 1)

        # Already gone.
        storage.delete_file(first)

    def test_list_respects_limit(self):
        for _ in range(3):
            self._upload()
        self.assertEqual(len(storage.list_files(limit=2)), 2)

    def test_backend_failure_is_storage_error(self):
        with patch("media_library.services.storage.default_storage") as backend:
            backend.save.side_effect = OSError("disk full")
            with self.assertLogs("media_library.services.storage", level="ERROR"):
                with self.assertRaisesMessage(MediaStorageError, "Failed to upload file"):
                    self._upload()

            backend.listdir.side_effect = PermissionError("denied")
            with self.assertLogs("media_library.services.storage", level="ERROR"):
                with self.assertRaisesMessage(MediaStorageError, "Failed to load files"):
                    storage.list_files()
