import sys

from infrastructure.terminal.editor import CONTROLLING_TERMINAL


QUIT_ANSWER = "q"


def ask_choice(question: str) -> str:
    # stderr, como o read -p: a pergunta aparece mesmo com stdout redirecionado.
    print(question, end="", flush=True, file=sys.stderr)
    try:
        with open(CONTROLLING_TERMINAL, "r") as terminal_in:
            answer = terminal_in.readline()
    except OSError:
        # Sem terminal de controle (ex.: CI); le da entrada padrao.
        answer = sys.stdin.readline()
    if not answer:
        # EOF: ninguem para responder, encerra como se o usuario saisse.
        print(file=sys.stderr)
        return QUIT_ANSWER
    return answer.strip()


def show(text: str) -> None:
    print(text)
