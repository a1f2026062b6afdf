"""Allow ``python -m portfolio_embeddings.cli`` execution."""

from portfolio_embeddings.cli.create_embeddings import main

main()
