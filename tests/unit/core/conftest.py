"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_LATEX = r"""
\textbf{Journal preface}

\textbf{IRSTI 06.81.23}

\textbf{A. Author}\textsuperscript{1}

\href{mailto:a@b.com}{\nolinkurl{a@b.com}}

\begin{enumerate}
\def\labelenumi{\arabic{enumi}.}
\item
  First point
\item Second point
\end{enumerate}

\pandocbounded{\includegraphics[keepaspectratio]{media/image1.png}}

\textbf{IRSTI 11.25. 40}

Body with \ul{underlined} text and \textquotedbl quoted\textquotedbl.
"""


@pytest.fixture(name="sample_latex")
def sample_latex_fixture():
    return SAMPLE_LATEX
