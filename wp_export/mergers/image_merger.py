from __future__ import annotations

from typing import Iterable, List

from ..models.post import ImageRecord, PostRecord


def is_parent_match(image: ImageRecord, post: PostRecord) -> bool:
    """The image was uploaded to, or found in the body of, this post."""
    return image.post_id is not None and image.post_id == post.id


def is_cover_match(image: ImageRecord, post: PostRecord) -> bool:
    """The image was set as the featured image of this post."""
    return image.id is not None and image.id == post.cover_image_id


def merge_images_into_posts(images: Iterable[ImageRecord], posts: List[PostRecord]) -> None:
    """
    Attach each image to the posts it belongs to, mutating ``posts`` in place.

    An image belongs to a post if it is parented to it or is its cover
    image.  URLs are appended in the order images are encountered and are
    never duplicated, so running the merge twice changes nothing.  The
    description of an attached image is stored under its filename.
    """
    for image in images:
        for post in posts:
            should_attach = is_parent_match(image, post)

            if is_cover_match(image, post):
                should_attach = True
                post.cover_image = image.filename
                if image.description:
                    post.cover_image_description = image.description

            if should_attach and post.add_image_url(image.url):
                if image.description:
                    post.image_descriptions[image.filename] = image.description
