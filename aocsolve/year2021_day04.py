"""2021 day 4: bingo with a giant squid."""

from aocsolve.inputs import log_result, parse_csv_numbers, read_lines

MARKED = -1


def parse_draws(line):
    """Parse the comma separated drawn numbers."""
    return parse_csv_numbers(line)


def parse_boards(lines):
    """Parse space separated boards.

    A board is complete only once a blank line follows it; rows left without
    a closing blank line are dropped.
    """
    boards = []
    board = []
    for line in lines:
        if not line:
            if board and board[0]:
                boards.append(board)
            board = []
            continue
        board.append([int(token) for token in line.split(" ") if token])
    return boards


def board_has_won(board):
    """True when a whole row or column is marked."""
    lines = [*board, *(list(column) for column in zip(*board))]
    return any(line and all(number == MARKED for number in line) for line in lines)


def score_board(board):
    """Sum of the numbers not yet marked."""
    return sum(number for row in board for number in row if number != MARKED)


def run_bingo(draws, boards, first_win):
    """Play the draws and return the score of the first or the last board to win.

    The score is the sum of unmarked numbers times the winning draw, or 0 when
    the game ends undecided. The given boards are left untouched.
    """
    grids = [[list(row) for row in board] for board in boards]
    won = [False] * len(grids)
    score = 0
    for draw in draws:
        for index, board in enumerate(grids):
            for row in board:
                for col, number in enumerate(row):
                    if number != draw:
                        continue
                    row[col] = MARKED
                    if not board_has_won(board):
                        continue
                    score = score_board(board) * draw
                    if first_win:
                        return score
                    won[index] = True
                    if all(won):
                        return score
    return score


def run(path):
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    draws = parse_draws(lines[0])
    boards = parse_boards(lines[1:])
    first = run_bingo(draws, boards, True)
    log_result(4, 1, "Score for first winning board is: ", first)
    last = run_bingo(draws, boards, False)
    log_result(4, 2, "Score for last winning board is: ", last)
    return first, last