# Lets the test modules import the top-level modules from a source checkout.
