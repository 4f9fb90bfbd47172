"""
Static domain knowledge for heuristic CV analysis.

Pure read-only data: extractors take these by reference, so adding a term here needs
no code change elsewhere. Terms are listed in canonical display casing; matching is
case-insensitive. Pattern strings are regular expressions applied to lowercase lines.
"""

TECHNICAL_SKILLS: tuple = (
    # Languages
    "Swift", "SwiftUI", "UIKit", "Objective-C", "Python", "Java", "JavaScript", "TypeScript",
    "Kotlin", "Rust", "C++", "C#", "PHP", "Ruby", "Scala",
    # Frameworks
    "React", "React Native", "Vue", "Angular", "Node.js", "Express", "Django", "Flask",
    "FastAPI", "Spring Boot", "Flutter",
    # Datastores
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "DynamoDB", "Cassandra", "Snowflake",
    "SQLite", "Oracle", "SQL Server", "Firebase", "Realm",
    # Cloud & DevOps
    "AWS", "Google Cloud", "Azure", "Docker", "Kubernetes", "Jenkins", "GitLab CI/CD",
    "Terraform", "Ansible", "Chef", "Puppet", "Nginx", "Apache",
    # Mobile & frontend
    "iOS", "Android", "Xcode", "Android Studio", "HTML5", "CSS3", "Sass", "SCSS",
    "Bootstrap", "Tailwind CSS", "Material UI", "Ant Design",
    # Data & ML
    "TensorFlow", "PyTorch", "Scikit-learn", "Pandas", "NumPy", "Matplotlib", "Seaborn",
    "Jupyter", "Tableau", "Power BI", "Spark", "Hadoop", "Kafka",
    # Tools
    "Git", "GitHub", "GitLab", "Bitbucket", "Jira", "Confluence", "Slack", "Figma",
    "Sketch", "Adobe XD", "Photoshop", "Illustrator", "VS Code", "IntelliJ",
    # Architecture & practices
    "Microservices", "REST API", "GraphQL", "MVVM", "MVC", "Clean Architecture",
    "Design Patterns", "Agile", "Scrum", "DevOps", "CI/CD",
)

SOFT_SKILLS: tuple = (
    "Leadership", "Communication", "Teamwork", "Problem Solving", "Critical Thinking",
    "Project Management", "Agile", "Scrum", "Mentoring", "Training", "Coaching",
    "Collaboration", "Time Management", "Organization", "Analytical Thinking",
    "Creative Problem Solving", "Adaptability", "Flexibility", "Innovation",
    "Strategic Thinking", "Decision Making", "Conflict Resolution", "Negotiation",
    "Presentation Skills", "Public Speaking", "Cross-functional Collaboration",
)

ROLE_TITLES: tuple = (
    "Senior iOS Developer", "iOS Developer", "Mobile Developer", "Software Engineer",
    "Senior Software Engineer", "Lead Developer", "Tech Lead", "Engineering Manager",
    "Frontend Developer", "Backend Developer", "Full Stack Developer", "DevOps Engineer",
    "Data Scientist", "Senior Data Scientist", "Machine Learning Engineer",
    "Product Manager", "Senior Product Manager", "UX Designer", "UI Designer",
    "UX/UI Designer", "Senior Designer", "Design Lead", "Creative Director",
    "Business Analyst", "Data Analyst", "Systems Analyst", "Solutions Architect",
    "Cloud Architect", "Security Engineer", "QA Engineer", "Test Engineer",
)

# Ordered by priority: the first pattern that matches anywhere in the text wins.
YEARS_OF_EXPERIENCE_PATTERNS: tuple = (
    r"(\d+)\+?\s*years?\s*of\s*experience",
    r"(\d+)\+?\s*years?\s*experience",
    r"(\d+)\+?\s*yrs?\s*experience",
    r"experience.*?(\d+)\+?\s*years?",
    r"(\d+)\+?\s*years?.*?experience",
)

EDUCATION_PATTERNS: tuple = (
    # Degrees
    r"bachelor.*?of.*?(science|arts|engineering|business|fine arts)",
    r"master.*?of.*?(science|arts|business|engineering)",
    r"phd.*?in.*?",
    r"doctorate.*?in.*?",
    r"doctor.*?of.*?",
    r"associate.*?degree",
    r"diploma.*?in.*?",
    r"certificate.*?in.*?",
    # Institutions with a year
    r"university.*?\|.*?\d{4}",
    r"college.*?\|.*?\d{4}",
    r"institute.*?\|.*?\d{4}",
    r"school.*?\|.*?\d{4}",
    # GPA
    r"gpa.*?\d\.\d",
    r"grade.*?point.*?average",
    # Graduation
    r"graduated.*?\d{4}",
    r"graduation.*?\d{4}",
    r"class.*?of.*?\d{4}",
    # Honors
    r"magna cum laude",
    r"summa cum laude",
    r"cum laude",
    r"with distinction",
    r"with honors",
    r"dean's list",
    r"honor roll",
)

EDUCATION_KEYWORDS: tuple = (
    "bachelor", "master", "phd", "doctorate", "degree", "university", "college",
    "institute", "school", "gpa", "graduated", "graduation", "thesis",
    "coursework", "major", "minor", "concentration", "specialization",
)

CERTIFICATION_PATTERNS: tuple = (
    # AWS
    r"aws certified.*?(solutions architect|developer|sysops|devops|security|machine learning"
    r"|data analytics|database|network|advanced networking)",
    r"amazon web services.*?certified",
    # Google Cloud
    r"google cloud.*?(professional|associate).*?(cloud architect|data engineer|cloud developer"
    r"|cloud security engineer|cloud network engineer)",
    r"gcp.*?certified",
    # Azure
    r"microsoft azure.*?(fundamentals|associate|expert).*?(administrator|developer"
    r"|solutions architect|security engineer|data engineer)",
    r"azure.*?certified",
    # Development & process
    r"oracle certified.*?(professional|associate).*?(java|database|mysql)",
    r"certified.*?(scrum master|product owner|agile)",
    r"pmp.*?certified",
    r"cissp.*?certified",
    r"comptia.*?(security\+|network\+|a\+|linux\+)",
    # Design
    r"adobe certified.*?(expert|associate).*?(photoshop|illustrator|indesign|after effects)",
    r"google ux design.*?certificate",
    r"nielsen norman group.*?certification",
    # Data
    r"tensorflow.*?developer.*?certificate",
    r"certified analytics professional",
    r"tableau.*?certified",
    r"databricks.*?certified",
    # Generic shapes
    r"certified.*?\w+.*?\(\d{4}\)",
    r"certificate.*?in.*?\w+",
    r"certification.*?\-.*?\w+.*?\(\d{4}\)",
    r"professional.*?certificate.*?\-.*?\w+",
)

CERTIFICATION_KEYWORDS: tuple = (
    "certified", "certificate", "certification", "professional", "associate",
    "expert", "specialist", "aws", "google cloud", "azure", "oracle",
    "microsoft", "adobe", "cisco", "comptia", "pmp", "scrum", "agile",
    "tensorflow", "tableau", "databricks", "salesforce",
)

CERTIFICATION_YEAR_PATTERN: str = r"\b(20[1-2][0-9])\b"

PROJECT_INDICATORS: tuple = (
    "app", "platform", "system", "project", "built", "developed", "created",
)

ACHIEVEMENT_VERBS: tuple = (
    "increased", "improved", "reduced", "achieved", "led", "won", "awarded",
    "recognized", "featured", "published", "speaker", "mentored", "generated",
    "saved", "optimized", "launched", "delivered",
)

SPOKEN_LANGUAGES: tuple = (
    "English", "Spanish", "French", "German", "Italian", "Portuguese", "Dutch",
    "Russian", "Mandarin", "Cantonese", "Chinese", "Japanese", "Korean", "Arabic",
    "Hindi", "Urdu", "Bengali", "Turkish", "Indonesian", "Malay", "Vietnamese",
    "Polish", "Swedish",
)

# Line-length windows (exclusive bounds) that reject headers and run-on paragraphs.
EDUCATION_LINE_LENGTH = (10, 300)
CERTIFICATION_LINE_LENGTH = (5, 200)
PROJECT_MAX_LENGTH = 150
ACHIEVEMENT_MAX_LENGTH = 200
LANGUAGE_LINE_MAX_LENGTH = 40
