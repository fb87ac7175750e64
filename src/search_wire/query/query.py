"""Search query builder and its compilation into ``FT.SEARCH`` arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from search_wire.domain import ReplyShape, reply_shape_from_options
from search_wire.query.fields import FieldName, HighlightTags, Paging, append_counted, validate_dialect

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from search_wire.domain import CommandArg
    from search_wire.query.filters import Filter

# Default of ``fields`` in highlight and summarize: keep fields set earlier.
_KEEP_FIELDS: Final[Any] = object()


class Query:
    """Describe one full-text search request.

    Builder methods configure the instance in place and return it, so calls
    can be chained. A query is meant to be configured by one caller and then
    compiled; it is not safe to mutate it concurrently.

    Args:
        query_string: Engine query expression, ``"*"`` matches everything.

    """

    def __init__(self, query_string: str = "*") -> None:
        self.query_string = query_string
        self.filters: list[Filter] = []
        self.paging = Paging()

        self.is_verbatim = False
        self.is_no_content = False
        self.is_no_stopwords = False
        self.is_with_scores = False
        self.is_with_payloads = False
        self.is_in_order = False

        self.language_name: str | None = None
        self.scorer_name: str | None = None
        self.payload_value: str | None = None
        self.expander_name: str | None = None
        self.sort_field: str | None = None
        self.sort_ascending: bool | None = None

        self.in_fields: tuple[str, ...] = ()
        self.in_keys: tuple[str, ...] = ()
        self.returned_fields: tuple[str, ...] = ()
        self.returned_field_names: tuple[FieldName, ...] = ()

        self.wants_highlight = False
        self.highlight_field_names: tuple[str, ...] | None = None
        self.highlight_tags: HighlightTags | None = None

        self.wants_summarize = False
        self.summarize_field_names: tuple[str, ...] | None = None
        self.summarize_frags: int | None = None
        self.summarize_len: int | None = None
        self.summarize_separator: str | None = None

        self.params: dict[str, Any] = {}
        self.dialect_version: int | None = None
        self.slop_value = -1
        self.timeout_ms = -1

    def __repr__(self) -> str:
        return f"Query({self.query_string!r})"

    def limit(self, offset: int, count: int) -> Query:
        """Return ``count`` results starting at ``offset`` (zero based)."""
        self.paging = Paging(offset=offset, count=count)
        return self

    def add_filter(self, query_filter: Filter) -> Query:
        """Add a numeric or geo filter; all filters must match."""
        self.filters.append(query_filter)
        return self

    def verbatim(self, value: bool = True) -> Query:  # noqa: FBT001, FBT002
        """Disable stemming and query expansion."""
        self.is_verbatim = value
        return self

    def no_content(self, value: bool = True) -> Query:  # noqa: FBT001, FBT002
        """Return document ids only."""
        self.is_no_content = value
        return self

    def no_stopwords(self, value: bool = True) -> Query:  # noqa: FBT001, FBT002
        """Keep stopwords in the query."""
        self.is_no_stopwords = value
        return self

    def with_scores(self, value: bool = True) -> Query:  # noqa: FBT001, FBT002
        """Return the relative score of each document."""
        self.is_with_scores = value
        return self

    def with_payloads(self, value: bool = True) -> Query:  # noqa: FBT001, FBT002
        """Return document payloads, if any were indexed."""
        self.is_with_payloads = value
        return self

    def language(self, language: str) -> Query:
        """Set the stemming language."""
        self.language_name = language
        return self

    def scorer(self, scorer: str) -> Query:
        """Set the scoring function, e.g. ``TFIDF`` or ``BM25``."""
        self.scorer_name = scorer
        return self

    def payload(self, payload: str) -> Query:
        """Set the payload handed to the scoring function."""
        self.payload_value = payload
        return self

    def limit_fields(self, *fields: str) -> Query:
        """Restrict matching to the given text fields."""
        self.in_fields = fields
        return self

    def limit_keys(self, *keys: str) -> Query:
        """Restrict matching to the given document keys."""
        self.in_keys = keys
        return self

    def return_fields(self, *fields: str) -> Query:
        """Project the reply onto the given fields.

        Replaces any projection set with :meth:`return_field_names`.
        """
        self.returned_fields = fields
        self.returned_field_names = ()
        return self

    def return_field_names(self, *fields: FieldName) -> Query:
        """Project the reply onto fields that may be renamed with an alias.

        Replaces any projection set with :meth:`return_fields`.
        """
        self.returned_fields = ()
        self.returned_field_names = fields
        return self

    def return_field(self, name: str, alias: str | None = None) -> Query:
        """Append one aliased field to the current aliased projection."""
        self.returned_fields = ()
        self.returned_field_names = (*self.returned_field_names, FieldName(name=name, alias=alias))
        return self

    def highlight(
        self,
        fields: Sequence[str] | None = _KEEP_FIELDS,
        tags: HighlightTags | tuple[str, str] | None = None,
    ) -> Query:
        """Highlight matched terms.

        Once called, the ``HIGHLIGHT`` clause is always emitted. ``fields=None``
        highlights every field; omitting ``fields`` or passing an empty sequence
        keeps fields set earlier.

        Args:
            fields (Sequence[str] | None): Fields to highlight.
            tags (HighlightTags | tuple[str, str] | None): Opening and closing tags.

        Returns:
            Query: The query itself.

        """
        if fields is None:
            self.highlight_field_names = None
        elif fields is not _KEEP_FIELDS and len(fields) > 0:
            self.highlight_field_names = tuple(fields)
        if isinstance(tags, tuple):
            tags = HighlightTags(open=tags[0], close=tags[1])
        self.highlight_tags = tags
        self.wants_highlight = True
        return self

    def summarize(
        self,
        fields: Sequence[str] | None = _KEEP_FIELDS,
        context_len: int | None = None,
        num_frags: int | None = None,
        separator: str | None = None,
    ) -> Query:
        """Return fragments of the matched fields instead of their full text.

        Once called, the ``SUMMARIZE`` clause is always emitted. ``fields=None``
        summarizes every field; omitting ``fields`` or passing an empty sequence
        keeps fields set earlier.

        Args:
            fields (Sequence[str] | None): Fields to summarize.
            context_len (int | None): Number of context words per fragment.
            num_frags (int | None): Number of fragments per field.
            separator (str | None): Fragment separator.

        Returns:
            Query: The query itself.

        """
        if fields is None:
            self.summarize_field_names = None
        elif fields is not _KEEP_FIELDS and len(fields) > 0:
            self.summarize_field_names = tuple(fields)
        self.summarize_len = context_len
        self.summarize_frags = num_frags
        self.summarize_separator = separator
        self.wants_summarize = True
        return self

    def sort_by(self, field: str, ascending: bool | None = None) -> Query:  # noqa: FBT001
        """Sort by a sortable field; ``ascending=None`` keeps the engine default."""
        self.sort_field = field
        self.sort_ascending = ascending
        return self

    def add_param(self, name: str, value: str | float) -> Query:
        """Bind ``$name`` in the query string; a repeated name overwrites its value."""
        self.params[name] = value
        return self

    def add_params(self, params: Mapping[str, str | float]) -> Query:
        """Bind several parameters at once."""
        for name, value in params.items():
            self.add_param(name, value)
        return self

    def dialect(self, dialect: int) -> Query:
        """Set the query dialect version; ``0`` is rejected."""
        self.dialect_version = validate_dialect(dialect)
        return self

    def slop(self, slop: int) -> Query:
        """Allow up to ``slop`` unmatched terms between phrase terms."""
        self.slop_value = slop
        return self

    def timeout(self, timeout_ms: int) -> Query:
        """Set the query timeout in milliseconds."""
        self.timeout_ms = timeout_ms
        return self

    def in_order(self) -> Query:
        """Require query terms to appear in the same order in documents."""
        self.is_in_order = True
        return self

    def expander(self, expander: str) -> Query:
        """Use a custom query expander instead of the stemmer."""
        self.expander_name = expander
        return self

    @property
    def reply_shape(self) -> ReplyShape:
        """Return the options that shape the reply to this query."""
        return reply_shape_from_options(
            no_content=self.is_no_content,
            with_scores=self.is_with_scores,
            with_payloads=self.is_with_payloads,
        )

    def get_args(self, default_dialect: int | None = None) -> list[CommandArg]:
        """Compile the query into ``FT.SEARCH`` arguments, index excluded.

        Clauses are emitted in the fixed order the engine parser expects and
        only when configured. The query itself is left untouched.

        Args:
            default_dialect (int | None): Dialect used when none is set on the query.

        Returns:
            list[CommandArg]: Ordered wire tokens.

        """
        args: list[CommandArg] = [self.query_string]

        if self.is_verbatim:
            args.append("VERBATIM")
        if self.is_no_content:
            args.append("NOCONTENT")
        if self.is_no_stopwords:
            args.append("NOSTOPWORDS")
        if self.is_with_scores:
            args.append("WITHSCORES")
        if self.is_with_payloads:
            args.append("WITHPAYLOADS")
        if self.language_name is not None:
            args.extend(("LANGUAGE", self.language_name))
        if self.scorer_name is not None:
            args.extend(("SCORER", self.scorer_name))
        if self.in_fields:
            args.extend(("INFIELDS", len(self.in_fields), *self.in_fields))
        if self.sort_field is not None:
            args.extend(("SORTBY", self.sort_field))
            if self.sort_ascending is not None:
                args.append("ASC" if self.sort_ascending else "DESC")
        if self.payload_value is not None:
            args.extend(("PAYLOAD", self.payload_value))
        if not self.paging.is_default:
            args.extend(("LIMIT", self.paging.offset, self.paging.count))

        for query_filter in self.filters:
            query_filter.append_args(args)

        if self.wants_highlight:
            self._append_highlight(args)
        if self.wants_summarize:
            self._append_summarize(args)

        if self.in_keys:
            args.extend(("INKEYS", len(self.in_keys), *self.in_keys))

        if self.returned_fields:
            args.extend(("RETURN", len(self.returned_fields), *self.returned_fields))
        elif self.returned_field_names:
            append_counted(args, "RETURN", self.returned_field_names)

        if self.params:
            args.extend(("PARAMS", len(self.params) * 2))
            for name, value in self.params.items():
                args.extend((name, value))

        dialect = self.dialect_version if self.dialect_version is not None else default_dialect
        if dialect is not None and dialect >= 1:
            args.extend(("DIALECT", dialect))
        if self.slop_value >= 0:
            args.extend(("SLOP", self.slop_value))
        if self.timeout_ms >= 0:
            args.extend(("TIMEOUT", self.timeout_ms))
        if self.is_in_order:
            args.append("INORDER")
        if self.expander_name is not None:
            args.extend(("EXPANDER", self.expander_name))

        return args

    def _append_highlight(self, args: list[CommandArg]) -> None:
        args.append("HIGHLIGHT")
        if self.highlight_field_names is not None:
            args.extend(("FIELDS", len(self.highlight_field_names), *self.highlight_field_names))
        if self.highlight_tags is not None:
            args.extend(("TAGS", self.highlight_tags.open, self.highlight_tags.close))

    def _append_summarize(self, args: list[CommandArg]) -> None:
        args.append("SUMMARIZE")
        if self.summarize_field_names is not None:
            args.extend(("FIELDS", len(self.summarize_field_names), *self.summarize_field_names))
        if self.summarize_frags is not None:
            args.extend(("FRAGS", self.summarize_frags))
        if self.summarize_len is not None:
            args.extend(("LEN", self.summarize_len))
        if self.summarize_separator is not None:
            args.extend(("SEPARATOR", self.summarize_separator))
