"""Split a raw IRC line into words with nothing but the primitives."""

from ircprims import crlf, nonwhite, space

line = memoryview(b"PRIVMSG #ircprims :hi\r\n")
words = []
while line and not crlf(line):
    word = line
    while result := nonwhite(line):
        line = result.remainder
    words.append(bytes(word[: len(word) - len(line)]))
    if skipped := space(line):
        line = skipped.remainder

print(words)  # [b'PRIVMSG', b'#ircprims', b':hi']
