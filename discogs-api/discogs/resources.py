"""
Typed shapes for Discogs API payloads.

Responses are validated into these with Resource.load_json(), request bodies
are built from them with Resource.to_json(). Every field defaults to None so
an empty instance can be handed to the request pipeline as a destination.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError


class Resource(BaseModel):
    """Base for every payload shape.

    Validation is strict: a JSON string is not accepted for an integer field
    and so on. Keys without a matching field are ignored.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)

    def load_json(self, body):
        """Validate a raw JSON document and copy the fields it sets onto self.

        Nothing is assigned unless the whole document validates; failures
        raise DecodeError chained to the ValidationError.
        """
        try:
            decoded = type(self).model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(str(e)) from e
        for name in decoded.model_fields_set:
            setattr(self, name, getattr(decoded, name))
        return self

    def to_json(self):
        """JSON object for this resource, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Shared pieces


class PageURLs(Resource):
    first: Optional[str] = None
    last: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None


class Page(Resource):
    """Pagination block returned alongside every list endpoint."""

    page: Optional[int] = None
    pages: Optional[int] = None
    per_page: Optional[int] = None
    items: Optional[int] = None
    urls: Optional[PageURLs] = None


class Image(Resource):
    type: Optional[str] = None
    uri: Optional[str] = None
    uri150: Optional[str] = None
    resource_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class Video(Resource):
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    embed: Optional[bool] = None
    uri: Optional[str] = None


class ArtistSource(Resource):
    """Artist credit embedded in releases, masters and tracks."""

    id: Optional[int] = None
    name: Optional[str] = None
    anv: Optional[str] = None
    join: Optional[str] = None
    role: Optional[str] = None
    tracks: Optional[str] = None
    resource_url: Optional[str] = None


class LabelSource(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    catno: Optional[str] = None
    entity_type: Optional[str] = None
    entity_type_name: Optional[str] = None
    resource_url: Optional[str] = None


class Format(Resource):
    name: Optional[str] = None
    qty: Optional[str] = None
    text: Optional[str] = None
    descriptions: Optional[list[str]] = None


class Identifier(Resource):
    type: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None


class Track(Resource):
    position: Optional[str] = None
    type_: Optional[str] = None
    title: Optional[str] = None
    duration: Optional[str] = None
    artists: Optional[list[ArtistSource]] = None
    extraartists: Optional[list[ArtistSource]] = None


class Rating(Resource):
    average: Optional[float] = None
    count: Optional[int] = None


class Contributor(Resource):
    username: Optional[str] = None
    resource_url: Optional[str] = None


class Community(Resource):
    have: Optional[int] = None
    want: Optional[int] = None
    rating: Optional[Rating] = None
    status: Optional[str] = None
    data_quality: Optional[str] = None
    submitter: Optional[Contributor] = None
    contributors: Optional[list[Contributor]] = None


# Database


class ApiRoot(Resource):
    """Welcome document served at the API root."""

    hello: Optional[str] = None
    api_version: Optional[str] = None
    documentation_url: Optional[str] = None
    statistics: Optional[dict[str, int]] = None


class Release(Resource):
    id: Optional[int] = None
    title: Optional[str] = None
    status: Optional[str] = None
    year: Optional[int] = None
    country: Optional[str] = None
    released: Optional[str] = None
    released_formatted: Optional[str] = None
    notes: Optional[str] = None
    data_quality: Optional[str] = None
    thumb: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    date_added: Optional[str] = None
    date_changed: Optional[str] = None
    estimated_weight: Optional[int] = None
    format_quantity: Optional[int] = None
    num_for_sale: Optional[int] = None
    lowest_price: Optional[float] = None
    artists: Optional[list[ArtistSource]] = None
    extraartists: Optional[list[ArtistSource]] = None
    labels: Optional[list[LabelSource]] = None
    companies: Optional[list[LabelSource]] = None
    series: Optional[list[LabelSource]] = None
    formats: Optional[list[Format]] = None
    identifiers: Optional[list[Identifier]] = None
    genres: Optional[list[str]] = None
    styles: Optional[list[str]] = None
    tracklist: Optional[list[Track]] = None
    images: Optional[list[Image]] = None
    videos: Optional[list[Video]] = None
    community: Optional[Community] = None


class ReleaseRating(Resource):
    release_id: Optional[int] = None
    rating: Optional[Rating] = None


class UserReleaseRating(Resource):
    """A single user's rating of a release, 0 when unrated."""

    username: Optional[str] = None
    release_id: Optional[int] = None
    rating: Optional[int] = None


class Alias(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    resource_url: Optional[str] = None


class Member(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    resource_url: Optional[str] = None


class Artist(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    realname: Optional[str] = None
    profile: Optional[str] = None
    data_quality: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    releases_url: Optional[str] = None
    namevariations: Optional[list[str]] = None
    urls: Optional[list[str]] = None
    aliases: Optional[list[Alias]] = None
    members: Optional[list[Member]] = None
    groups: Optional[list[Member]] = None
    images: Optional[list[Image]] = None


class Sublabel(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    resource_url: Optional[str] = None


class Label(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    profile: Optional[str] = None
    contact_info: Optional[str] = None
    data_quality: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    releases_url: Optional[str] = None
    parent_label: Optional[Sublabel] = None
    sublabels: Optional[list[Sublabel]] = None
    urls: Optional[list[str]] = None
    images: Optional[list[Image]] = None


class Master(Resource):
    id: Optional[int] = None
    title: Optional[str] = None
    year: Optional[int] = None
    main_release: Optional[int] = None
    main_release_url: Optional[str] = None
    most_recent_release: Optional[int] = None
    most_recent_release_url: Optional[str] = None
    versions_url: Optional[str] = None
    num_for_sale: Optional[int] = None
    lowest_price: Optional[float] = None
    data_quality: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    artists: Optional[list[ArtistSource]] = None
    genres: Optional[list[str]] = None
    styles: Optional[list[str]] = None
    tracklist: Optional[list[Track]] = None
    images: Optional[list[Image]] = None
    videos: Optional[list[Video]] = None


class ReleaseStats(Resource):
    in_wantlist: Optional[int] = None
    in_collection: Optional[int] = None


class ReleaseSource(Resource):
    """Release entry in artist and label discographies."""

    id: Optional[int] = None
    title: Optional[str] = None
    type: Optional[str] = None
    artist: Optional[str] = None
    label: Optional[str] = None
    catno: Optional[str] = None
    format: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    thumb: Optional[str] = None
    year: Optional[int] = None
    main_release: Optional[int] = None
    resource_url: Optional[str] = None
    stats: Optional[dict[str, ReleaseStats]] = None


class ArtistReleases(Resource):
    pagination: Optional[Page] = None
    releases: Optional[list[ReleaseSource]] = None


class LabelReleases(Resource):
    pagination: Optional[Page] = None
    releases: Optional[list[ReleaseSource]] = None


class Version(Resource):
    id: Optional[int] = None
    title: Optional[str] = None
    label: Optional[str] = None
    catno: Optional[str] = None
    country: Optional[str] = None
    format: Optional[str] = None
    released: Optional[str] = None
    status: Optional[str] = None
    thumb: Optional[str] = None
    resource_url: Optional[str] = None
    major_formats: Optional[list[str]] = None


class MasterVersions(Resource):
    pagination: Optional[Page] = None
    versions: Optional[list[Version]] = None


# Collection


class Folder(Resource):
    id: Optional[int] = None
    name: Optional[str] = None
    count: Optional[int] = None
    resource_url: Optional[str] = None


class CollectionFolders(Resource):
    folders: Optional[list[Folder]] = None


class BasicInformation(Resource):
    id: Optional[int] = None
    title: Optional[str] = None
    year: Optional[int] = None
    thumb: Optional[str] = None
    cover_image: Optional[str] = None
    resource_url: Optional[str] = None
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    artists: Optional[list[ArtistSource]] = None
    labels: Optional[list[LabelSource]] = None
    formats: Optional[list[Format]] = None
    genres: Optional[list[str]] = None
    styles: Optional[list[str]] = None


class Note(Resource):
    field_id: Optional[int] = None
    value: Optional[str] = None


class CollectionItem(Resource):
    id: Optional[int] = None
    instance_id: Optional[int] = None
    folder_id: Optional[int] = None
    rating: Optional[int] = None
    date_added: Optional[str] = None
    basic_information: Optional[BasicInformation] = None
    notes: Optional[list[Note]] = None


class CollectionItems(Resource):
    pagination: Optional[Page] = None
    releases: Optional[list[CollectionItem]] = None


class CollectionValue(Resource):
    """Formatted amounts, e.g. "$123.45"."""

    minimum: Optional[str] = None
    median: Optional[str] = None
    maximum: Optional[str] = None


# Marketplace


class Price(Resource):
    currency: Optional[str] = None
    value: Optional[float] = None


class SellerStats(Resource):
    rating: Optional[str] = None
    stars: Optional[float] = None
    total: Optional[int] = None


class Seller(Resource):
    id: Optional[int] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    resource_url: Optional[str] = None
    url: Optional[str] = None
    payment: Optional[str] = None
    shipping: Optional[str] = None
    min_order_total: Optional[float] = None
    stats: Optional[SellerStats] = None


class ListingRelease(Resource):
    id: Optional[int] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    description: Optional[str] = None
    format: Optional[str] = None
    catalog_number: Optional[str] = None
    thumbnail: Optional[str] = None
    year: Optional[int] = None
    resource_url: Optional[str] = None


class Listing(Resource):
    id: Optional[int] = None
    status: Optional[str] = None
    condition: Optional[str] = None
    sleeve_condition: Optional[str] = None
    comments: Optional[str] = None
    ships_from: Optional[str] = None
    posted: Optional[str] = None
    allow_offers: Optional[bool] = None
    audio: Optional[bool] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    external_id: Optional[str] = None
    location: Optional[str] = None
    weight: Optional[float] = None
    format_quantity: Optional[int] = None
    price: Optional[Price] = None
    original_price: Optional[Price] = None
    seller: Optional[Seller] = None
    release: Optional[ListingRelease] = None


class Inventory(Resource):
    pagination: Optional[Page] = None
    listings: Optional[list[Listing]] = None


class NewListing(Resource):
    """Body for editing a listing. release_id, condition and
    price are required by the API; status is "For Sale" or "Draft"."""

    release_id: Optional[int] = None
    condition: Optional[str] = None
    sleeve_condition: Optional[str] = None
    price: Optional[float] = None
    comments: Optional[str] = None
    allow_offers: Optional[bool] = None
    status: Optional[str] = None
    external_id: Optional[str] = None
    location: Optional[str] = None
    weight: Optional[float] = None
    format_quantity: Optional[int] = None


class PriceSuggestions(Resource):
    """Suggested price per media condition."""

    mint: Optional[Price] = Field(default=None, alias="Mint (M)")
    near_mint: Optional[Price] = Field(default=None, alias="Near Mint (NM or M-)")
    very_good_plus: Optional[Price] = Field(default=None, alias="Very Good Plus (VG+)")
    very_good: Optional[Price] = Field(default=None, alias="Very Good (VG)")
    good_plus: Optional[Price] = Field(default=None, alias="Good Plus (G+)")
    good: Optional[Price] = Field(default=None, alias="Good (G)")
    fair: Optional[Price] = Field(default=None, alias="Fair (F)")
    poor: Optional[Price] = Field(default=None, alias="Poor (P)")


class Stats(Resource):
    lowest_price: Optional[Price] = None
    num_for_sale: Optional[int] = None
    blocked_from_sale: Optional[bool] = None


# Search


class SearchCommunity(Resource):
    have: Optional[int] = None
    want: Optional[int] = None


class Result(Resource):
    id: Optional[int] = None
    type: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[str] = None
    cover_image: Optional[str] = None
    country: Optional[str] = None
    year: Optional[str] = None
    catno: Optional[str] = None
    uri: Optional[str] = None
    resource_url: Optional[str] = None
    master_id: Optional[int] = None
    master_url: Optional[str] = None
    format: Optional[list[str]] = None
    label: Optional[list[str]] = None
    genre: Optional[list[str]] = None
    style: Optional[list[str]] = None
    barcode: Optional[list[str]] = None
    community: Optional[SearchCommunity] = None


class Search(Resource):
    pagination: Optional[Page] = None
    results: Optional[list[Result]] = None
