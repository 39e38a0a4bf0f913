"""
Resource wrappers: one module per monday.com entity.

Every public function takes the client first and returns a Response.
MondayClient binds each module as an attribute, so
``board.create(client, args=...)`` is also ``client.board.create(args=...)``.
"""
