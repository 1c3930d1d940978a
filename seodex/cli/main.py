"""Main CLI application using Cyclopts."""

import cyclopts

from seodex.cli.commands import authors, db, taxonomies

app = cyclopts.App(
    name="seodex",
    help="SEO indexables - taxonomy watcher and author indexable builder",
)

app.command(db.app, name="db")
app.command(taxonomies.app, name="taxonomies")
app.command(authors.app, name="authors")
