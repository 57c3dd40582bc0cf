# models/surah.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base

class Chapter(Base):
    __tablename__ = 'chapters'

    chapter_number = Column(Integer, primary_key=True)
    number_of_ayahs = Column(Integer, nullable=False)
    name_arabic = Column(String(100), nullable=False, default='')
    name_transcribed = Column(String(255), nullable=False, default='')
    name_transliterated = Column(String(255), nullable=False, default='')
    revelation_order = Column(Integer, nullable=True)
    revelation_place = Column(String(20), nullable=True)
    pages = Column(String(50), nullable=True)  # "first,last" mushaf page

    names = relationship("ChapterName", back_populates="chapter", cascade="all, delete-orphan")
    segments = relationship("VerseSegmentRecord", back_populates="chapter",
                            cascade="all, delete-orphan", order_by="VerseSegmentRecord.sequence_index")

    def __repr__(self):
        return f'<Chapter {self.chapter_number} {self.name_transliterated} [{self.number_of_ayahs}]>'

class ChapterName(Base):
    __tablename__ = 'chapter_names'
    __table_args__ = (UniqueConstraint('chapter_number', 'language_code'),)

    id = Column(Integer, primary_key=True, index=True)
    chapter_number = Column(Integer, ForeignKey('chapters.chapter_number'), nullable=False, index=True)
    language_code = Column(String(10), nullable=False)
    name = Column(String(255), nullable=False)

    chapter = relationship("Chapter", back_populates="names")

class VerseSegmentRecord(Base):
    __tablename__ = 'verse_segments'
    __table_args__ = (UniqueConstraint('chapter_number', 'sequence_index'),)

    id = Column(Integer, primary_key=True, index=True)
    chapter_number = Column(Integer, ForeignKey('chapters.chapter_number'), nullable=False, index=True)
    sequence_index = Column(Integer, nullable=False)
    verse_number = Column(Integer, nullable=True, index=True)
    text_tajweed = Column(Text, nullable=False, default='')
    text_transcribed = Column(Text, nullable=False, default='')

    chapter = relationship("Chapter", back_populates="segments")
    translations = relationship("SegmentTranslation", back_populates="segment", cascade="all, delete-orphan")
    words = relationship("SegmentWord", back_populates="segment",
                         cascade="all, delete-orphan", order_by="SegmentWord.position")

    def __repr__(self):
        return f'<VerseSegment {self.chapter_number}:{self.verse_number} #{self.sequence_index}>'

class SegmentTranslation(Base):
    __tablename__ = 'segment_translations'

    id = Column(Integer, primary_key=True, index=True)
    segment_id = Column(Integer, ForeignKey('verse_segments.id'), nullable=False, index=True)
    resource_id = Column(Integer, nullable=False, index=True)
    text = Column(Text, nullable=False, default='')

    segment = relationship("VerseSegmentRecord", back_populates="translations")

class SegmentWord(Base):
    __tablename__ = 'segment_words'

    id = Column(Integer, primary_key=True, index=True)
    segment_id = Column(Integer, ForeignKey('verse_segments.id'), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    text = Column(String(255), nullable=False, default='')
    translation = Column(String(255), nullable=False, default='')
    transliteration = Column(String(255), nullable=False, default='')
    char_type = Column(String(10), nullable=False, default='word')

    segment = relationship("VerseSegmentRecord", back_populates="words")
