"""
Merging custom images into the existing signature index.

Both inputs are already sorted by signature, so a single pass is enough:

 - an existing entry with a smaller signature is kept untouched
 - a pending image with a smaller signature is inserted
 - on equal signatures the pending image replaces the existing one

Pending images are only turned into pixel blocks (via `resolve`) at the point
they are emitted. Kept entries are never re-encoded.
"""


def iter_merged(signatures, images, pending, resolve):
    """
    Yield (signature, pixel block) pairs in ascending signature order.

    `signatures` and `images` are the parallel index and image table read from
    the database, `pending` is a sequence of PendingImage sorted by signature
    and `resolve` turns a PendingImage's filepath into a pixel block.
    """
    if len(signatures) != len(images):
        raise ValueError(f"{len(signatures)} signatures but {len(images)} images")

    i = 0
    j = 0
    while i < len(signatures) and j < len(pending):
        if signatures[i] < pending[j].signature:
            yield signatures[i], images[i]
            i += 1
        elif signatures[i] > pending[j].signature:
            yield pending[j].signature, resolve(pending[j].filepath)
            j += 1
        # signature is already in the database, replace the old image with the new one
        else:
            yield pending[j].signature, resolve(pending[j].filepath)
            i += 1
            j += 1

    for k in range(i, len(signatures)):
        yield signatures[k], images[k]
    for k in range(j, len(pending)):
        yield pending[k].signature, resolve(pending[k].filepath)


def build_new_db(signatures, images, pending, resolve):
    """Merge pending images into the index and image table, returning new (signatures, images) lists"""
    new_signatures = []
    new_images = []
    for signature, image in iter_merged(signatures, images, pending, resolve):
        new_signatures.append(signature)
        new_images.append(image)
    return new_signatures, new_images
