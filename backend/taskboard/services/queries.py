"""SQL Templates: every statement the services run, with positional placeholders.

Invariants:
    - Placeholders are $1..$n only; values are bound by the executor, never formatted in
    - Inserts return the created row via RETURNING
    - Listing reads are ordered so repeated reads return identical row sets
"""

USERS_SELECT = "SELECT id, name, email FROM users ORDER BY id"
USER_INSERT = (
    "INSERT INTO users(name, email) VALUES($1, $2) "
    "RETURNING id, name, email"
)

BOARDS_SELECT = (
    "SELECT b.id, b.name, bu.user_id AS admin_user_id "
    "FROM boards b JOIN board_users bu ON bu.board_id = b.id "
    "WHERE bu.is_admin = $1 ORDER BY b.id, bu.user_id"
)
BOARD_INSERT = "INSERT INTO boards(name) VALUES($1) RETURNING id, name"

BOARD_USERS_SELECT = (
    "SELECT id, board_id, user_id, is_admin FROM board_users "
    "WHERE board_id = $1 ORDER BY id"
)
BOARD_USER_INSERT = (
    "INSERT INTO board_users(board_id, user_id, is_admin) VALUES($1, $2, $3) "
    "RETURNING id, board_id, user_id, is_admin"
)

LISTS_SELECT = "SELECT id, name FROM lists WHERE board_id = $1 ORDER BY id"
LIST_INSERT = (
    "INSERT INTO lists(name, board_id) VALUES($1, $2) "
    "RETURNING id, name, board_id"
)

CARDS_SELECT = (
    "SELECT id, title, description, due_date FROM cards "
    "WHERE list_id = $1 ORDER BY id"
)
CARD_INSERT = (
    "INSERT INTO cards(title, description, due_date, list_id) "
    "VALUES($1, $2, $3, $4) "
    "RETURNING id, title, description, due_date, list_id"
)

CARD_USERS_SELECT = (
    "SELECT user_id, is_owner FROM card_users "
    "WHERE card_id = $1 ORDER BY user_id"
)
CARD_USER_INSERT = (
    "INSERT INTO card_users(card_id, user_id, is_owner) VALUES($1, $2, $3) "
    "RETURNING id, card_id, user_id, is_owner"
)
