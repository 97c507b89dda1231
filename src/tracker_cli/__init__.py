"""Command-line front end for the training tracker."""
