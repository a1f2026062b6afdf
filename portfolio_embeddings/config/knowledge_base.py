"""Built-in knowledge store: the facts about the site owner that get embedded.

The chat widget on the portfolio site answers visitor questions by
similarity search over the vectors generated from these chunks.  Edit the
text here (or point ``KNOWLEDGE_CHUNKS_PATH`` at a JSON file) and re-run
``create-embeddings build`` to rebuild ``vector-database.json``.

Order matters only for log readability; ids must stay unique and stable.
"""

from __future__ import annotations

from portfolio_embeddings.models.knowledge import KnowledgeChunk

KNOWLEDGE_CHUNKS: tuple[KnowledgeChunk, ...] = (
    KnowledgeChunk(
        id="chunk-1",
        text=(
            "Hello, I’m Adil Hasan. Full‑stack developer crafting "
            "AI‑powered web experiences and automation. Web developer & AI "
            "tinkerer | JavaScript, Python, Node.js | Building automation, "
            "AI‑powered tools & creative experiments in code. Full-stack "
            "learner."
        ),
    ),
    KnowledgeChunk(
        id="chunk-2",
        text=(
            "I build web apps end‑to‑end and explore AI/ML to create "
            "useful, human‑friendly tools. Currently focused on automation, "
            "transliteration, and developer utilities. I like turning ideas "
            "into working products with clean, accessible UI and practical "
            "engineering."
        ),
    ),
    KnowledgeChunk(
        id="chunk-3",
        text=(
            "Current Focus: Arabic Romanizer (AI transliteration tool using "
            "ChatGPT 5 API, coming soon). VeoCreator (AI video generation tool "
            "using Google Gemini’s Veo 3, coming soon). Experimenting with AI "
            "APIs and web automation workflows. Open to collaborations and "
            "freelance opportunities."
        ),
    ),
    KnowledgeChunk(
        id="chunk-4",
        text=(
            "Collaboration Policy: I welcome meaningful projects and respectful "
            "collaboration. I maintain clear religious boundaries and do not "
            "work on projects that promote, support, or endorse anything "
            "contrary to my faith and practice—such as shirk, kufr, zandaqah "
            "(heresy), false deities (ṭawāġīt), or bidʿah (innovations in "
            "Islām). I also avoid using flags or symbolism that may represent "
            "anti‑Islamic ideologies. If your project aligns with these "
            "principles, I’m happy to discuss."
        ),
    ),
    KnowledgeChunk(
        id="chunk-5",
        text=(
            "Quick Facts: Company: Raven Corp.Tech. Role: Full‑stack "
            "Developer. Open to: Internships, Junior roles, Freelance. "
            "Location: Remote."
        ),
    ),
    KnowledgeChunk(
        id="chunk-6",
        text=(
            "Skills: HTML, CSS, JavaScript, Python, Node.js, AI APIs, Web "
            "Automation, Exploring AI/ML"
        ),
    ),
    KnowledgeChunk(
        id="chunk-7",
        text=(
            "Experience: Independent Developer — Raven Corp.Tech. 2024 — "
            "Present • Remote. Building “Arabic Romanizer” (AI tool for "
            "Arabic → Roman transliteration using ChatGPT 5 API). Developing "
            "“VeoCreator” (AI video generator using Google Gemini’s Veo "
            "3). Prototyping automation scripts and AI utilities using "
            "JavaScript, Python, and Node.js."
        ),
    ),
    KnowledgeChunk(
        id="chunk-8",
        text=(
            "Project - Arabic Romanizer: (Coming soon). AI‑powered Arabic → "
            "Roman transliteration tool. Tags: JavaScript, AI, Web App."
        ),
    ),
    KnowledgeChunk(
        id="chunk-9",
        text=(
            "Project - The Olden Ways: A minimal, aesthetic website project. "
            "Tags: HTML, CSS, JavaScript. Status: Live."
        ),
    ),
    KnowledgeChunk(
        id="chunk-10",
        text=(
            "Project - Selcouth: A clean, elegant site exploring uncommon "
            "aesthetics. Tags: HTML, CSS, JavaScript. Status: Live."
        ),
    ),
    KnowledgeChunk(
        id="chunk-11",
        text=(
            "Project - Portfolio Website: This site — responsive, "
            "SEO‑friendly personal portfolio. Tags: HTML, CSS, JavaScript. "
            "Status: Live."
        ),
    ),
    KnowledgeChunk(
        id="chunk-12",
        text=(
            "Project - The Nobles of Sudan: The official historical and "
            "genealogical website of the Nobles of Sudan (أشراف "
            "السودان), documenting their Hashemite lineage, families, "
            "and heritage. Tags: HTML, CSS, JavaScript, History, Genealogy. "
            "Status: Live."
        ),
    ),
    KnowledgeChunk(
        id="chunk-13",
        text=(
            "Project - Shaykh Dr. Khālid al-Ḥāyik Website: A dedicated site "
            "presenting the work, teachings, and publications of Shaykh Dr. "
            "Khālid al-Ḥāyik. Tags: HTML, CSS, JavaScript. Status: Live."
        ),
    ),
    KnowledgeChunk(
        id="chunk-14",
        text=(
            "Project - VeoCreator: (Coming soon). An AI‑powered video "
            "generation tool that uses Google Gemini’s Veo 3 model. Tags: "
            "JavaScript, Web App, Creative Tools, AI."
        ),
    ),
)
